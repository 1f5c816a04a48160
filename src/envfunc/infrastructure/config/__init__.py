"""Configuration helpers."""

from .parsing import INT64_MAX, INT64_MIN, parse_bool, parse_int

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "parse_bool",
    "parse_int",
]
