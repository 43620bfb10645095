"""
recordsort - Multi-criteria Record Comparison and Sorting

This package compares and sorts structured records (mappings, or objects
exposing attributes) by an ordered list of criteria. It includes:

- Comparison criteria with typed, pattern-aware value coercion
- A record comparator usable directly or as a sort key
- Serialization of criteria to and from plain records

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "recordsort Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 11):
    raise RuntimeError("recordsort requires Python 3.11 or higher")

# Import commonly used components for easier access
from .core import (
    ComparisonCriterion,
    ComparisonSettings,
    ComparisonType,
    DataFormatError,
    RecordComparator,
    ValidationError,
    compare_records,
    sort_records,
)

__all__ = [
    "ComparisonCriterion",
    "ComparisonSettings",
    "ComparisonType",
    "DataFormatError",
    "RecordComparator",
    "ValidationError",
    "compare_records",
    "sort_records",
]
