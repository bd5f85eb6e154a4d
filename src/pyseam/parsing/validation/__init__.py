"""Line classification for SEAM material files."""

from .line_classifier import LineKind, RecordPhase, classify_line, block_name, is_opaque_block

__all__ = [
    "LineKind",
    "RecordPhase",
    "classify_line",
    "block_name",
    "is_opaque_block"
]
