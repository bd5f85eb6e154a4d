"""Control file reading and input path resolution."""

from .control_file import ControlFileResolver, ResolvedInputFiles, extract_file_name

__all__ = [
    "ControlFileResolver",
    "ResolvedInputFiles",
    "extract_file_name"
]
