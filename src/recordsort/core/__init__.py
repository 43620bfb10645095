"""Core record comparison functionality."""

from .enums import ComparisonType
from .exceptions import ConfigurationError, DataFormatError, ValidationError
from .config import DEFAULT_SETTINGS, ComparisonSettings
from .models import ComparisonCriterion
from .ordering import compare_nulls, compare_objects
from .comparator import RecordComparator, compare_records, sort_records

__all__ = [
    "ComparisonCriterion",
    "ComparisonSettings",
    "ComparisonType",
    "ConfigurationError",
    "DataFormatError",
    "DEFAULT_SETTINGS",
    "RecordComparator",
    "ValidationError",
    "compare_nulls",
    "compare_objects",
    "compare_records",
    "sort_records",
]
