"""
Constants shared across pyseam.

This package provides the file-naming conventions, parser marker characters
and control file role table used by the parsing and driver modules.
"""

from .constants.processing_constants import FileConstants, ParsingConstants, ControlFileConstants

__all__ = [
    "FileConstants",
    "ParsingConstants",
    "ControlFileConstants"
]
