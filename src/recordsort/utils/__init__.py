"""
Utility functions for record comparison.

This package provides the helpers the comparator is built on:
- get_value: Safely read a possibly nested value from a record
- to_string, to_integer, to_decimal, to_boolean: Scalar coercion
- to_datetime, to_duration: Pattern-based temporal coercion
"""

from .coercion import (
    parse_iso_duration,
    to_boolean,
    to_datetime,
    to_decimal,
    to_duration,
    to_integer,
    to_string,
)
from .records import get_value

__all__ = [
    "get_value",
    "parse_iso_duration",
    "to_boolean",
    "to_datetime",
    "to_decimal",
    "to_duration",
    "to_integer",
    "to_string",
]
