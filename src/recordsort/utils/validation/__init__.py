"""
Validation package for recordsort.

This package provides schema validation for serialized comparison criteria.
"""

from .base import ValidationResult
from .schema import CRITERION_RECORD_SCHEMA, CriterionSchemaValidator

__all__ = [
    "ValidationResult",
    "CRITERION_RECORD_SCHEMA",
    "CriterionSchemaValidator",
]
