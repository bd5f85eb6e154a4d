import logging
import re
from typing import List

from pyseam.data.constants import ParsingConstants

logger = logging.getLogger(__name__)

_FIELD_SEPARATOR = re.compile(ParsingConstants.FIELD_SEPARATOR_REGEX)
_NUMERIC_TOKEN = re.compile(ParsingConstants.NUMERIC_TOKEN_REGEX)


def split_fields(line: str) -> List[str]:
    """
    Split a record line into fields.

    Commas and whitespace are interchangeable separators and empty
    fields (as in ``0.3,,panel_b``) are dropped.
    """
    return [token for token in _FIELD_SEPARATOR.split(line) if token]


def is_numeric_token(token: str) -> bool:
    return bool(_NUMERIC_TOKEN.match(token))


def parse_numeric_prefix(tokens: List[str]) -> List[float]:
    """
    Converts the leading numeric tokens to floats.

    Conversion stops at the first token that is not a plain decimal or
    scientific-notation number; that token and everything after it is ignored.
    """
    values = []
    for token in tokens:
        if not is_numeric_token(token):
            logger.debug("Numeric fields end at token '%s'", token)
            break
        values.append(float(token))
    return values
