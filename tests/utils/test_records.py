"""
Tests for record access utilities.
"""

from dataclasses import dataclass

from recordsort.utils.records import get_value


@dataclass
class Address:
    city: str


@dataclass
class Person:
    name: str
    address: Address


def test_get_value_mapping():
    """Test reading top-level keys from a mapping."""
    record = {"a": 1, "b": None}
    assert get_value(record, "a") == 1
    assert get_value(record, "b") is None
    assert get_value(record, "missing") is None
    assert get_value(None, "a") is None


def test_get_value_path():
    """Test reading nested values through mappings and sequences."""
    record = {"a": {"b": [{"c": "x"}, {"c": "y"}]}}
    assert get_value(record, "a/b/1/c") == "y"
    assert get_value(record, "a/b/5/c") is None
    assert get_value(record, "a/b/first/c") is None
    assert get_value(record, "a/z/c") is None


def test_get_value_literal_key_wins():
    """Test that a literal key containing the separator takes precedence."""
    assert get_value({"a/b": 1, "a": {"b": 2}}, "a/b") == 1


def test_get_value_custom_separator():
    """Test paths with a custom separator."""
    assert get_value({"a": {"b": 3}}, "a.b", separator=".") == 3
    assert get_value({"a": {"b": 3}}, "a.b") is None


def test_get_value_objects():
    """Test reading attributes from objects."""
    person = Person(name="Ann", address=Address(city="Oslo"))
    assert get_value(person, "name") == "Ann"
    assert get_value(person, "address/city") == "Oslo"
    assert get_value(person, "age") is None


def test_get_value_does_not_index_strings():
    """Test that strings are not traversed by index."""
    assert get_value({"a": "text"}, "a/0") is None
