"""Strict literal parsers for environment values."""

from __future__ import annotations

import re


_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}

_INT_RE = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
_INT64_DIGITS = len(str(INT64_MAX))


def parse_bool(value: str) -> bool:
    """Parse a boolean literal.

    Only the canonical spellings are accepted; "yes", "on" and padded
    values are rejected.

    Raises:
        ValueError: If *value* is not a boolean literal.
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError("invalid syntax")


def parse_int(value: str) -> int:
    """Parse a signed base-10 integer that fits in 64 bits.

    Unlike ``int()``, surrounding whitespace and digit separators are
    rejected.

    Raises:
        ValueError: On bad syntax or a value outside the int64 range.
    """
    if not _INT_RE.fullmatch(value):
        raise ValueError("invalid syntax")
    if len(value.lstrip("+-").lstrip("0")) > _INT64_DIGITS:
        raise ValueError("value out of range")
    parsed = int(value)
    if parsed < INT64_MIN or parsed > INT64_MAX:
        raise ValueError("value out of range")
    return parsed
