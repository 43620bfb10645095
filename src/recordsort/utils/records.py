"""
Record access utilities.

This module provides the single read path the comparator uses to pull a value
out of a record. Records are normally mappings, but any object exposing the
requested names as attributes can be compared as well.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from ..core.config import DEFAULT_PATH_SEPARATOR


def _step(curr: Any, segment: str) -> Any:
    if curr is None:
        return None
    if isinstance(curr, Mapping):
        return curr.get(segment)
    if isinstance(curr, Sequence) and not isinstance(curr, (str, bytes, bytearray)):
        try:
            return curr[int(segment)]
        except (ValueError, IndexError):
            return None
    return getattr(curr, segment, None)


def get_value(record: Any, key: str, separator: str = DEFAULT_PATH_SEPARATOR) -> Any:
    """
    Safely get a value from a record by key.

    A key present literally in a mapping record always wins. Otherwise a key
    containing the separator is treated as a path: mappings are traversed by
    key, lists and tuples by integer index and other objects by attribute.
    Absent values at any point of the path yield None.

    Args:
        record: Mapping or object to read from
        key: Key or separator-delimited key path (e.g., "address/lines/0")
        separator: Path segment separator

    Returns:
        The value found, or None if it is absent

    Example:
        >>> get_value({"a": {"b": [10, 20]}}, "a/b/1")
        20
        >>> get_value({"a/b": 1, "a": {"b": 2}}, "a/b")
        1
    """
    if record is None:
        return None
    if isinstance(record, Mapping) and key in record:
        return record[key]
    if separator and separator in key:
        curr = record
        for segment in key.split(separator):
            curr = _step(curr, segment)
            if curr is None:
                return None
        return curr
    return _step(record, key)
