"""
Ordering primitives shared by all comparison types.

compare_objects provides a total, deterministic ordering over arbitrary
Python values for criteria of the OBJECT type. compare_nulls applies the
null ordering used uniformly by every criterion.
"""

from decimal import Decimal
from numbers import Real
from typing import Any, Optional

# Builtin numbers order among themselves, so they share the int type group
_NUMBER_GROUP = "builtins.int"


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _type_group(value: Any) -> str:
    if isinstance(value, (Real, Decimal)):
        return _NUMBER_GROUP
    cls = type(value)
    return f"{cls.__module__}.{cls.__qualname__}"


def compare_values(a: Any, b: Any) -> int:
    """Compare two values of the same coerced type, returning -1, 0 or 1."""
    return _sign(a, b)


def compare_objects(a: Any, b: Any) -> int:
    """
    Compare two arbitrary non-null values.

    The ordering is decided by the first of these steps that separates the
    values:

    1. Natural ordering, when the values support it and it is decisive
       (a < b, b < a or a == b)
    2. Their type groups: the fully qualified type name, with all builtin
       numbers (int, float, Decimal, bool) sharing one group
    3. Their string representations, compared ordinally
    4. Their identities, for distinct values that are otherwise identical

    Comparing type groups before strings sorts each group as a block, so
    mixed values such as 10, "2" and 3 never form a cycle. Step 4 keeps
    values that are not equal from ever comparing as equal; its result is
    stable for the lifetime of the values.

    Args:
        a: First value
        b: Second value

    Returns:
        -1, 0 or 1

    Example:
        >>> compare_objects("ABC", "XYZ")
        -1
        >>> compare_objects(10, "2")  # numbers sort before str
        -1
    """
    try:
        if a < b:
            return -1
        if b < a:
            return 1
        if a == b:
            return 0
    except TypeError:
        pass

    result = _sign(_type_group(a), _type_group(b))
    if result == 0:
        result = _sign(str(a), str(b))
    if result == 0 and a is not b and a != b:
        result = _sign(id(a), id(b))
    return result


def compare_nulls(a: Any, b: Any, nulls_first: bool = True) -> Optional[int]:
    """
    Order two values when either of them is None.

    Args:
        a: First value
        b: Second value
        nulls_first: True if None sorts before every other value

    Returns:
        -1, 0 or 1 if either value is None, otherwise None
    """
    if a is None and b is None:
        return 0
    if a is None:
        return -1 if nulls_first else 1
    if b is None:
        return 1 if nulls_first else -1
    return None
