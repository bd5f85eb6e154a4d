"""Processing and file constants for pyseam."""

from .processing_constants import FileConstants, ParsingConstants, ControlFileConstants

__all__ = [
    "FileConstants",
    "ParsingConstants",
    "ControlFileConstants"
]
