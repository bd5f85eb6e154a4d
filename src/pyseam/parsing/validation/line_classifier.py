import logging
from enum import auto, Enum

from pyseam.data.constants import ParsingConstants

logger = logging.getLogger(__name__)


# --- Enums ---
class LineKind(Enum):
    BLANK = auto()
    COMMENT = auto()
    BLOCK_OPEN = auto()
    BLOCK_CLOSE = auto()
    DATA = auto()


class RecordPhase(Enum):
    """Position of the record cursor within a two-line material record."""
    AWAITING_HEADER = auto()
    AWAITING_PROPERTIES = auto()

    def advance(self) -> 'RecordPhase':
        if self is RecordPhase.AWAITING_HEADER:
            return RecordPhase.AWAITING_PROPERTIES
        return RecordPhase.AWAITING_HEADER


# --- Classification ---
# Rules are keyed on the first non-blank character of the line.
CLASSIFICATION_RULES = {
    ParsingConstants.COMMENT_MARKER: LineKind.COMMENT,
    ParsingConstants.BLOCK_OPEN_MARKER: LineKind.BLOCK_OPEN,
    ParsingConstants.BLOCK_CLOSE_MARKER: LineKind.BLOCK_CLOSE,
}


def classify_line(line: str) -> LineKind:
    """Classifies a physical line of a material file; never fails on empty input."""
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    return CLASSIFICATION_RULES.get(stripped[0], LineKind.DATA)


def block_name(line: str) -> str:
    """
    Returns the keyword of a block marker line.
    Examples:
        '(FREQVAL'   -> 'FREQVAL'
        '((MATDATA'  -> 'MATDATA'
        ')'          -> ''
    """
    body = line.strip().lstrip(ParsingConstants.BLOCK_OPEN_MARKER + ParsingConstants.BLOCK_CLOSE_MARKER)
    parts = body.replace(',', ' ').split()
    return parts[0].upper() if parts else ''


def is_opaque_block(line: str) -> bool:
    """True if the block opened by ``line`` holds data this parser skips (frequency tables)."""
    return block_name(line) in ParsingConstants.OPAQUE_BLOCK_NAMES
