"""
Value coercion utilities.

This module converts raw record values into the representation required by a
criterion's comparison type. Every function takes a non-null value and either
returns a comparable value or raises ValueError / TypeError describing why the
value could not be converted. The comparator wraps those failures with the
field and criterion that produced them.

Datetime patterns:
    - "datetime" / "iso8601": ISO 8601 date and time (a trailing "Z" is accepted)
    - "date": ISO 8601 calendar date (YYYY-MM-DD)
    - "time": ISO 8601 time of day (HH:MM[:SS[.ffffff]])
    - "milliseconds" / "seconds": Unix epoch offsets
    - anything else: a strptime format such as "%d/%m/%Y"

Duration patterns:
    - "xml" / "iso8601": ISO 8601 duration such as "P1DT2H30M" or "-PT15S"
    - "milliseconds", "seconds", "minutes", "hours", "days", "weeks": numbers in that unit
"""

import calendar
import re
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, FrozenSet, Optional

from ..core.config import DEFAULT_DATETIME_PATTERN, DEFAULT_DURATION_PATTERN, FALSE_TOKENS, TRUE_TOKENS

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ISO_DURATION = re.compile(
    r"^(?P<sign>[-+])?P"
    r"(?:(?P<years>\d+(?:\.\d+)?)Y)?"
    r"(?:(?P<months>\d+(?:\.\d+)?)M)?"
    r"(?:(?P<weeks>\d+(?:\.\d+)?)W)?"
    r"(?:(?P<days>\d+(?:\.\d+)?)D)?"
    r"(?:T(?=\d)"
    r"(?:(?P<hours>\d+(?:\.\d+)?)H)?"
    r"(?:(?P<minutes>\d+(?:\.\d+)?)M)?"
    r"(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?$"
)

# Average Gregorian month, used only for fractional months
_DAYS_PER_MONTH = Decimal("30.436875")

_DURATION_UNITS: Dict[str, timedelta] = {
    "milliseconds": timedelta(milliseconds=1),
    "seconds": timedelta(seconds=1),
    "minutes": timedelta(minutes=1),
    "hours": timedelta(hours=1),
    "days": timedelta(days=1),
    "weeks": timedelta(weeks=1),
}


def to_string(value: Any) -> str:
    """Render a value as a string for ordinal comparison."""
    return value if isinstance(value, str) else str(value)


def to_integer(value: Any) -> int:
    """
    Coerce a value to an integer.

    Integral floats and decimals are accepted; text is parsed as a base 10
    integer. Booleans are rejected rather than treated as 0 and 1.

    Raises:
        ValueError: If the value is not an integer
        TypeError: If the value has an unsupported type
    """
    if isinstance(value, bool):
        raise TypeError(f"{value!r} is a boolean, not an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        if value != value or value in (float("inf"), float("-inf")) or value != int(value):
            raise ValueError(f"{value!r} is not an integral number")
        return int(value)
    if isinstance(value, (str, bytes)):
        return int(value.strip())
    raise TypeError(f"Cannot convert {type(value).__name__} to integer")


def to_decimal(value: Any) -> Decimal:
    """
    Coerce a value to a Decimal.

    Raises:
        ValueError: If the value is not a finite or infinite number
        TypeError: If the value has an unsupported type
    """
    if isinstance(value, bool):
        raise TypeError(f"{value!r} is a boolean, not a decimal")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"{value!r} is not a decimal number") from None
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to decimal")

    if result.is_nan():
        raise ValueError(f"{value!r} is not a number")
    return result


def to_boolean(
    value: Any,
    true_tokens: FrozenSet[str] = TRUE_TOKENS,
    false_tokens: FrozenSet[str] = FALSE_TOKENS,
) -> bool:
    """
    Coerce a value to a boolean.

    Strings are matched case-insensitively against the given tokens; the
    integers 0 and 1 are accepted as well.

    Raises:
        ValueError: If the value is not a recognized boolean token
        TypeError: If the value has an unsupported type
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{value!r} is not a boolean")
    if isinstance(value, str):
        token = value.strip().lower()
        if token in true_tokens:
            return True
        if token in false_tokens:
            return False
        raise ValueError(f"{value!r} is not a boolean")
    raise TypeError(f"Cannot convert {type(value).__name__} to boolean")


def _as_utc(value: datetime) -> datetime:
    # Naive values are taken as UTC so that naive and aware values compare
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _parse_iso_datetime(text: str) -> datetime:
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _parse_iso_time(text: str) -> datetime:
    parsed = time.fromisoformat(text)
    return datetime.combine(EPOCH.date(), parsed)


def _parse_epoch(value: Any, unit: Decimal) -> datetime:
    offset = to_decimal(value) * unit
    return EPOCH + timedelta(seconds=float(offset))


def _parse_iso_date(text: str) -> datetime:
    return datetime.combine(date.fromisoformat(text), time())


_NAMED_DATETIME_PATTERNS: Dict[str, Callable[[Any], datetime]] = {
    "datetime": lambda v: _parse_iso_datetime(str(v).strip()),
    "iso8601": lambda v: _parse_iso_datetime(str(v).strip()),
    "date": lambda v: _parse_iso_date(str(v).strip()),
    "time": lambda v: _parse_iso_time(str(v).strip()),
    "milliseconds": lambda v: _parse_epoch(v, Decimal("0.001")),
    "seconds": lambda v: _parse_epoch(v, Decimal(1)),
}


def to_datetime(value: Any, pattern: Optional[str] = None) -> datetime:
    """
    Coerce a value to a timezone-aware datetime.

    datetime and date objects are used as they are; anything else is parsed
    with the given pattern, or the default "datetime" pattern if none is
    given. Naive results are taken as UTC.

    Args:
        value: Value to coerce
        pattern: Named pattern or strptime format

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the value does not match the pattern

    Example:
        >>> to_datetime("2024-01-02", "date")
        datetime.datetime(2024, 1, 2, 0, 0, tzinfo=datetime.timezone.utc)
        >>> to_datetime("02/01/2024", "%d/%m/%Y")
        datetime.datetime(2024, 1, 2, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return _as_utc(datetime.combine(value, time()))

    pattern = pattern or DEFAULT_DATETIME_PATTERN
    parser = _NAMED_DATETIME_PATTERNS.get(pattern.lower())
    if parser is not None:
        return _as_utc(parser(value))
    if not isinstance(value, str):
        raise TypeError(f"Cannot parse {type(value).__name__} with pattern {pattern!r}")
    return _as_utc(datetime.strptime(value.strip(), pattern))


def _add_months(start: datetime, months: int) -> datetime:
    year, month = divmod(start.month - 1 + months, 12)
    year += start.year
    day = min(start.day, calendar.monthrange(year, month + 1)[1])
    return start.replace(year=year, month=month + 1, day=day)


def parse_iso_duration(text: str) -> timedelta:
    """
    Parse an ISO 8601 duration such as "P1Y2M3DT4H5M6.5S".

    Years and months are resolved against the Unix epoch so that, for
    example, "P1M" is 31 days. A leading "-" negates the duration.

    Raises:
        ValueError: If the text is not an ISO 8601 duration
    """
    match = _ISO_DURATION.match(text.strip())
    if not match or not any(v for k, v in match.groupdict().items() if k != "sign"):
        raise ValueError(f"{text!r} is not an ISO 8601 duration")

    parts = {k: Decimal(v) for k, v in match.groupdict().items() if k != "sign" and v}
    total_months = parts.get("years", Decimal(0)) * 12 + parts.get("months", Decimal(0))
    whole_months = int(total_months)

    result = _add_months(EPOCH, whole_months) - EPOCH
    result += timedelta(days=float((total_months - whole_months) * _DAYS_PER_MONTH))
    result += timedelta(
        weeks=float(parts.get("weeks", 0)),
        days=float(parts.get("days", 0)),
        hours=float(parts.get("hours", 0)),
        minutes=float(parts.get("minutes", 0)),
        seconds=float(parts.get("seconds", 0)),
    )
    return -result if match.group("sign") == "-" else result


def to_duration(value: Any, pattern: Optional[str] = None) -> timedelta:
    """
    Coerce a value to a timedelta.

    timedelta objects are used as they are; anything else is parsed with the
    given pattern, or the default "xml" pattern if none is given.

    Args:
        value: Value to coerce
        pattern: "xml", "iso8601" or a unit name such as "seconds"

    Returns:
        The duration as a timedelta

    Raises:
        ValueError: If the value does not match the pattern or the pattern is unknown
    """
    if isinstance(value, timedelta):
        return value

    pattern = (pattern or DEFAULT_DURATION_PATTERN).lower()
    if pattern in ("xml", "iso8601"):
        if not isinstance(value, str):
            raise TypeError(f"Cannot parse {type(value).__name__} as an ISO 8601 duration")
        return parse_iso_duration(value)

    unit = _DURATION_UNITS.get(pattern)
    if unit is None:
        raise ValueError(f"Unknown duration pattern {pattern!r}")
    return unit * float(to_decimal(value))
