"""
Comparison criterion model.

This module defines ComparisonCriterion, the immutable description of one
ordering dimension of a multi-key sort: which field to read, how to coerce
its values, how to parse them and in which direction to order them.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple, Union

from ..utils.coercion import to_boolean
from ..utils.validation import CriterionSchemaValidator
from .enums import ComparisonType
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

_schema_validator = CriterionSchemaValidator()


def _parse_descending(value: Any) -> bool:
    if value is None:
        return False
    try:
        return to_boolean(value)
    except (TypeError, ValueError):
        raise ValidationError(f"descending must be a boolean, got {value!r}") from None


@dataclass(frozen=True)
class ComparisonCriterion:
    """
    A single criterion used to compare records.

    Attributes:
        key (str): Field whose values are compared
        type (ComparisonType): How values are coerced before comparison;
            strings and None are normalized, unknown tokens become OBJECT
        pattern (Optional[str]): Pattern used to parse DATETIME and DURATION
            values; ignored for every other type
        descending (bool): True to compare values in descending order

    Example:
        >>> ComparisonCriterion("created", "datetime", "%d/%m/%Y", descending=True)
        >>> ComparisonCriterion.from_record({"key": "age", "type": "integer"})
    """

    key: str
    type: ComparisonType = ComparisonType.OBJECT
    pattern: Optional[str] = None
    descending: bool = False

    def __post_init__(self):
        """Validate and normalize fields after initialization."""
        if not isinstance(self.key, str) or not self.key.strip():
            raise ValidationError("key must be a non-empty string")

        object.__setattr__(self, "type", ComparisonType.normalize(self.type))
        # Only temporal types read the pattern
        if self.type.requires_pattern and not isinstance(self.pattern, (str, type(None))):
            raise ValidationError(f"pattern must be a string for {self.type.value} criteria")
        if not isinstance(self.descending, bool):
            object.__setattr__(self, "descending", _parse_descending(self.descending))

    @property
    def field(self) -> str:
        """Field whose values are compared."""
        return self.key

    @property
    def ascending(self) -> bool:
        """True if values are compared in ascending order."""
        return not self.descending

    @classmethod
    def from_record(cls, record: Optional[Mapping]) -> "ComparisonCriterion":
        """
        Create a criterion from its serialized record form.

        The record holds the keys "key", "type", "pattern" and "descending".
        The older "descending?" spelling is also accepted and takes
        precedence when both are present.

        Args:
            record: Serialized criterion

        Returns:
            New ComparisonCriterion instance

        Raises:
            ValidationError: If the record is None or does not describe a valid criterion
        """
        if record is None:
            raise ValidationError("record must not be None")

        result = _schema_validator.validate_record(record)
        if not result.is_valid:
            raise ValidationError("; ".join(result.errors))
        for warning in result.warnings:
            logger.debug(warning)

        descending = record.get("descending?")
        if descending is None:
            descending = record.get("descending")

        return cls(
            key=record["key"],
            type=record.get("type"),
            pattern=record.get("pattern"),
            descending=_parse_descending(descending),
        )

    @classmethod
    def of(
        cls, criteria: Optional[Iterable[Union["ComparisonCriterion", Mapping]]]
    ) -> Optional[Tuple["ComparisonCriterion", ...]]:
        """
        Convert a sequence of serialized criteria into criteria.

        Entries that are already criteria are passed through unchanged. The
        conversion is all or nothing: one malformed entry fails the batch.

        Args:
            criteria: Criteria or criterion records, or None

        Returns:
            Tuple of criteria in the given order, or None if criteria is None

        Raises:
            ValidationError: If any entry is malformed, naming its index
        """
        if criteria is None:
            return None

        output = []
        for index, entry in enumerate(criteria):
            if isinstance(entry, cls):
                output.append(entry)
                continue
            try:
                output.append(cls.from_record(entry))
            except ValidationError as e:
                raise ValidationError(f"criterion {index}: {e.args[0]}") from e
        return tuple(output)

    def to_record(self) -> dict:
        """
        Return the serialized record form of this criterion.

        The type is rendered as its lowercase token, descending as the string
        "true" or "false", and pattern is omitted when it is not set.
        """
        record = {"key": self.key, "type": self.type.value}
        if self.pattern is not None:
            record["pattern"] = self.pattern
        record["descending"] = str(self.descending).lower()
        return record

    def __str__(self) -> str:
        return (
            f"{type(self).__name__}(key={self.key}, type={self.type.value}, "
            f"pattern={self.pattern}, descending={self.descending})"
        )
