"""
Enumerations for record comparison.

This module defines the closed set of value types a comparison criterion can
declare. Each type controls how a raw record value is coerced before two
values are compared.
"""

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ComparisonType(Enum):
    """
    Enumeration of the value types supported by comparison criteria.

    OBJECT is the default: values are compared as they are, using their
    natural ordering where one exists. Every other member coerces both values
    to a common representation first.
    """

    OBJECT = "object"  # Natural ordering, string fallback
    STRING = "string"  # Ordinal string comparison
    INTEGER = "integer"  # Arbitrary precision integers
    DECIMAL = "decimal"  # Arbitrary precision decimals
    BOOLEAN = "boolean"  # False sorts before true
    DATETIME = "datetime"  # Parsed with the criterion pattern
    DURATION = "duration"  # Parsed with the criterion pattern

    @property
    def requires_pattern(self) -> bool:
        """True if values of this type are parsed with a pattern."""
        return self in (ComparisonType.DATETIME, ComparisonType.DURATION)

    @classmethod
    def normalize(cls, value: Any) -> "ComparisonType":
        """
        Normalize a type token to a ComparisonType.

        Accepts ComparisonType members, member names or tokens in any case.
        None and unrecognized tokens normalize to OBJECT rather than failing.

        Args:
            value: Type token to normalize

        Returns:
            The matching ComparisonType, or OBJECT

        Example:
            >>> ComparisonType.normalize("Integer")
            <ComparisonType.INTEGER: 'integer'>
            >>> ComparisonType.normalize("unknown")
            <ComparisonType.OBJECT: 'object'>
        """
        if value is None:
            return cls.OBJECT
        if isinstance(value, cls):
            return value

        token = str(value).strip().lower()
        for member in cls:
            if token == member.value:
                return member

        logger.debug(f"Unrecognized comparison type {value!r}, using {cls.OBJECT.value}")
        return cls.OBJECT
