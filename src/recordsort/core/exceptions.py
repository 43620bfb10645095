"""
Custom exceptions for the record comparison system.

This module defines the exceptions raised while building comparison criteria
and while comparing records. Construction problems are reported immediately
when a criterion or comparator is created; value problems are reported when a
comparison actually needs the offending value.
"""

from typing import Any, Optional


class ValidationError(ValueError):
    """
    Raised when a comparison criterion cannot be constructed.

    This exception is raised when the inputs used to build a criterion fail to
    meet its requirements. No partially initialized criterion is ever
    returned when it is raised.

    Examples:
        * Missing or empty criterion key
        * A null record passed to a record-based factory
        * A serialized criterion record that violates the criterion schema
        * An unrecognized descending token
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class DataFormatError(ValueError):
    """
    Raised when a record value cannot be coerced to its criterion's type.

    This exception is raised at comparison time, for example when a numeric
    criterion meets non-numeric text or a datetime value does not match the
    criterion's pattern. It identifies the offending field and criterion so
    that misconfigured sort specifications can be diagnosed.

    Attributes:
        key (Optional[str]): Field the value was read from
        index (Optional[int]): Position of the criterion in the criteria list
        type (Any): Comparison type the value was being coerced to
        value (Any): The raw value that failed coercion

    Examples:
        * "abc" compared under an integer criterion
        * "2024-13-45" compared under a datetime criterion
        * "P1X" compared under a duration criterion
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        index: Optional[int] = None,
        type: Any = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.key = key
        self.index = index
        self.type = type
        self.value = value

    def __str__(self) -> str:
        """Format data format error message."""
        return f"Data Format Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when comparison settings are invalid.

    Examples:
        * Unknown settings key
        * Empty path separator
        * Overlapping true and false boolean tokens
    """
