"""
Compatibility shim for tools that still invoke setup.py directly.

All package metadata (name, dependencies, package discovery under src/pyseam/)
lives in pyproject.toml; prefer 'pip install .' or 'pip install -e .'.
"""

import warnings
from setuptools import setup

warnings.warn(
    "setup.py is deprecated for pyseam. Use 'pip install .' which reads pyproject.toml.",
    DeprecationWarning,
    stacklevel=2
)

if __name__ == "__main__":
    setup()
