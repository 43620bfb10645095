"""
Tests for the comparison type enumeration.
"""

import pytest

from recordsort.core.enums import ComparisonType


@pytest.mark.parametrize(
    "token, expected",
    [
        ("integer", ComparisonType.INTEGER),
        ("DECIMAL", ComparisonType.DECIMAL),
        (" DateTime ", ComparisonType.DATETIME),
        ("duration", ComparisonType.DURATION),
        ("boolean", ComparisonType.BOOLEAN),
        ("string", ComparisonType.STRING),
        ("object", ComparisonType.OBJECT),
    ],
)
def test_normalize_tokens(token, expected):
    """Test normalization of recognized type tokens in any case."""
    assert ComparisonType.normalize(token) is expected


def test_normalize_member():
    """Test that members normalize to themselves."""
    assert ComparisonType.normalize(ComparisonType.DURATION) is ComparisonType.DURATION


def test_normalize_lenient():
    """Test that None and unknown tokens fall back to OBJECT."""
    assert ComparisonType.normalize(None) is ComparisonType.OBJECT
    assert ComparisonType.normalize("") is ComparisonType.OBJECT
    assert ComparisonType.normalize("bogus") is ComparisonType.OBJECT
    assert ComparisonType.normalize(42) is ComparisonType.OBJECT


def test_requires_pattern():
    """Test that only temporal types use a pattern."""
    assert ComparisonType.DATETIME.requires_pattern
    assert ComparisonType.DURATION.requires_pattern
    assert not ComparisonType.STRING.requires_pattern
    assert not ComparisonType.OBJECT.requires_pattern
