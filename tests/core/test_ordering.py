"""
Tests for the generic ordering primitives.
"""

from decimal import Decimal

from recordsort.core.ordering import compare_nulls, compare_objects


def test_compare_greater_than():
    """Test natural ordering of strings."""
    assert compare_objects("XYZ", "ABC") > 0


def test_compare_less_than():
    """Test natural ordering, less than."""
    assert compare_objects("ABC", "XYZ") < 0


def test_compare_equal():
    """Test that equal values compare equal."""
    assert compare_objects(1, 1) == 0
    assert compare_objects(1, 1.0) == 0


def test_compare_incomparable():
    """Test that distinct incomparable values never compare equal."""
    a, b = object(), object()
    assert compare_objects(a, b) != 0
    assert compare_objects(a, b) == -compare_objects(b, a)
    assert compare_objects(a, a) == 0


def test_compare_mixed_types():
    """Test that mixed types are ordered by type group before string form."""
    assert compare_objects(10, "9") < 0  # numbers before str
    assert compare_objects(10, "2") < 0
    assert compare_objects("2", 3) > 0
    assert compare_objects(2.5, Decimal("3")) < 0
    assert compare_objects(1, "1") < 0  # builtins.int < builtins.str
    assert compare_objects("1", 1) > 0


def test_compare_partial_order_falls_back():
    """Test that indecisive natural orderings fall back to strings."""
    assert compare_objects({1}, {2}) < 0
    assert compare_objects({2}, {1}) > 0


def test_compare_dicts():
    """Test that unorderable values are compared by string form."""
    assert compare_objects({"a": 1}, {"b": 1}) < 0
    assert compare_objects({"a": 1}, {"a": 1}) == 0


def test_compare_nulls():
    """Test null ordering in both configurations."""
    assert compare_nulls(None, None) == 0
    assert compare_nulls(None, "x") == -1
    assert compare_nulls("x", None) == 1
    assert compare_nulls(None, "x", nulls_first=False) == 1
    assert compare_nulls("x", None, nulls_first=False) == -1
    assert compare_nulls("x", "y") is None


def test_mixed_types_are_transitive():
    """Test that mixed numbers and strings have no ordering cycles."""
    values = [10, "2", 3, 2.5, "10", frozenset({1})]
    for a in values:
        for b in values:
            for c in values:
                if compare_objects(a, b) < 0 and compare_objects(b, c) < 0:
                    assert compare_objects(a, c) < 0
