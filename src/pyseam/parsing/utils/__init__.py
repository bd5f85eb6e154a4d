"""Utility functions for parsing operations."""

from .tokenizer import (
    split_fields,
    is_numeric_token,
    parse_numeric_prefix
)

__all__ = [
    "split_fields",
    "is_numeric_token",
    "parse_numeric_prefix"
]
