"""Shared test fixtures."""

import pytest

from recordsort.core.comparator import RecordComparator
from recordsort.core.models import ComparisonCriterion


@pytest.fixture
def people() -> list:
    """Fixture providing a small set of person records."""
    return [
        {"name": "Carol", "age": "41", "team": "blue", "joined": "2021-03-04"},
        {"name": "alice", "age": "29", "team": "red", "joined": "2019-11-30"},
        {"name": "Bob", "age": "35", "team": "blue", "joined": "2020-06-15"},
        {"name": "Dave", "age": None, "team": "red", "joined": "2022-01-01"},
    ]


@pytest.fixture
def team_then_age() -> RecordComparator:
    """Fixture providing a comparator ordering by team, then age descending."""
    return RecordComparator(
        [
            ComparisonCriterion("team"),
            ComparisonCriterion("age", "integer", descending=True),
        ]
    )
