"""File parsers, run configuration and file keyword definitions."""

from .material_file_parser import MaterialFileParser, BaseFileParser
from .run_config import RunConfig, load_run_config
from . import file_keys as _fk

# Re-export everything defined in file_keys.__all__
globals().update({k: getattr(_fk, k) for k in _fk.__all__})

__all__ = [
    "MaterialFileParser",
    "BaseFileParser",
    "RunConfig",
    "load_run_config",
    *_fk.__all__,
]
