"""
Criterion-based record comparator.

This module compares and sorts records using an ordered list of comparison
criteria. Criteria are evaluated in priority order and the first one that
distinguishes two records decides their order; later criteria are never
consulted, so their values are never read or coerced.

Null values (including absent fields) sort before non-null values by
default, for every comparison type. Descending criteria negate the result,
so their nulls sort last.
"""

import logging
from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Union

from ..utils.coercion import to_boolean, to_datetime, to_decimal, to_duration, to_integer, to_string
from ..utils.records import get_value
from .config import DEFAULT_SETTINGS, ComparisonSettings
from .enums import ComparisonType
from .exceptions import DataFormatError
from .models import ComparisonCriterion
from .ordering import compare_nulls, compare_objects, compare_values

logger = logging.getLogger(__name__)

CriteriaInput = Optional[Sequence[Union[ComparisonCriterion, Mapping]]]


class RecordComparator:
    """
    Compares records according to an ordered list of criteria.

    Instances are immutable and hold no state between comparisons, so a
    single comparator can be shared freely between threads.

    Attributes:
        criteria (Tuple[ComparisonCriterion, ...]): Criteria in priority order
        settings (ComparisonSettings): Defaults applied by every criterion

    Example:
        >>> comparator = RecordComparator([
        ...     {"key": "team"},
        ...     {"key": "points", "type": "integer", "descending": "true"},
        ... ])
        >>> rows = comparator.sort(rows)
    """

    def __init__(self, criteria: CriteriaInput = None, settings: Optional[ComparisonSettings] = None):
        """
        Initialize the comparator.

        Args:
            criteria: Criteria or serialized criterion records; None or empty
                makes every pair of records compare equal
            settings: Comparison settings, or None for the defaults

        Raises:
            ValidationError: If any serialized criterion is malformed
        """
        self._criteria: Tuple[ComparisonCriterion, ...] = ComparisonCriterion.of(criteria) or ()
        self._settings = settings or DEFAULT_SETTINGS

    @property
    def criteria(self) -> Tuple[ComparisonCriterion, ...]:
        return self._criteria

    @property
    def settings(self) -> ComparisonSettings:
        return self._settings

    def _coercer(self, criterion: ComparisonCriterion) -> Optional[Callable[[Any], Any]]:
        """Return the coercion applied to values of a criterion, or None for OBJECT."""
        settings = self._settings
        coercers = {
            ComparisonType.OBJECT: None,
            ComparisonType.STRING: to_string,
            ComparisonType.INTEGER: to_integer,
            ComparisonType.DECIMAL: to_decimal,
            ComparisonType.BOOLEAN: lambda v: to_boolean(v, settings.true_tokens, settings.false_tokens),
            ComparisonType.DATETIME: lambda v: to_datetime(
                v, criterion.pattern or settings.default_datetime_pattern
            ),
            ComparisonType.DURATION: lambda v: to_duration(
                v, criterion.pattern or settings.default_duration_pattern
            ),
        }
        return coercers[criterion.type]

    def _compare_criterion(self, index: int, criterion: ComparisonCriterion, a: Any, b: Any) -> int:
        separator = self._settings.path_separator
        value_a = get_value(a, criterion.key, separator)
        value_b = get_value(b, criterion.key, separator)

        result = compare_nulls(value_a, value_b, self._settings.nulls_first)
        if result is not None:
            return result

        coerce = self._coercer(criterion)
        if coerce is None:
            return compare_objects(value_a, value_b)

        coerced = []
        for value in (value_a, value_b):
            try:
                coerced.append(coerce(value))
            except (ValueError, TypeError, ArithmeticError) as e:
                logger.debug(f"Failed to coerce {value!r} for criterion {index} ({criterion.key}): {e}")
                raise DataFormatError(
                    f"Cannot compare {value!r} as {criterion.type.value} "
                    f"for key '{criterion.key}' (criterion {index}): {e}",
                    key=criterion.key,
                    index=index,
                    type=criterion.type,
                    value=value,
                ) from e
        return compare_values(coerced[0], coerced[1])

    def compare(self, a: Any, b: Any) -> int:
        """
        Compare two records.

        Args:
            a: First record
            b: Second record

        Returns:
            -1 if a sorts before b, 1 if it sorts after b, 0 if all criteria tie

        Raises:
            DataFormatError: If a value of a deciding criterion cannot be coerced
        """
        for index, criterion in enumerate(self._criteria):
            result = self._compare_criterion(index, criterion, a, b)
            if result != 0:
                return -result if criterion.descending else result
        return 0

    __call__ = compare

    def sort_key(self) -> Callable[[Any], Any]:
        """Return a key function for sorted() and list.sort()."""
        return cmp_to_key(self.compare)

    def sort(self, records: Iterable[Any], reverse: bool = False) -> List[Any]:
        """
        Return a new list of the records in sorted order.

        The sort is stable: records that compare equal keep their relative
        order. The input is not modified.

        Args:
            records: Records to sort
            reverse: True to reverse the resulting order

        Raises:
            DataFormatError: If a value of a deciding criterion cannot be coerced
        """
        items = list(records)
        logger.debug(f"Sorting {len(items)} records on {len(self._criteria)} criteria")
        return sorted(items, key=self.sort_key(), reverse=reverse)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(c) for c in self._criteria)})"


def compare_records(
    a: Any, b: Any, criteria: CriteriaInput, settings: Optional[ComparisonSettings] = None
) -> int:
    """
    Compare two records using the given criteria.

    Example:
        >>> compare_records({"n": "5"}, {"n": "10"}, [{"key": "n", "type": "integer"}])
        -1
    """
    return RecordComparator(criteria, settings).compare(a, b)


def sort_records(
    records: Iterable[Any],
    criteria: CriteriaInput,
    reverse: bool = False,
    settings: Optional[ComparisonSettings] = None,
) -> List[Any]:
    """Return a new list of records sorted by the given criteria."""
    return RecordComparator(criteria, settings).sort(records, reverse=reverse)
