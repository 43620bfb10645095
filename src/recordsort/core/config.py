"""
Settings for record comparison.

This module holds the defaults applied when a criterion leaves something
unspecified: the pattern used for datetime and duration values without an
explicit pattern, where null values sort, the separator used in nested key
paths and the tokens recognized as booleans.
"""

from dataclasses import dataclass, field, fields
from typing import Any, FrozenSet, Mapping

from .exceptions import ConfigurationError

DEFAULT_DATETIME_PATTERN = "datetime"
DEFAULT_DURATION_PATTERN = "xml"
DEFAULT_PATH_SEPARATOR = "/"

TRUE_TOKENS = frozenset({"true", "t", "yes", "y", "on", "1"})
FALSE_TOKENS = frozenset({"false", "f", "no", "n", "off", "0"})


@dataclass(frozen=True)
class ComparisonSettings:
    """
    Settings shared by every criterion of a comparator.

    Attributes:
        default_datetime_pattern (str): Pattern for datetime criteria without one
        default_duration_pattern (str): Pattern for duration criteria without one
        nulls_first (bool): True if null values sort before non-null values
        path_separator (str): Separator between segments of a nested key
        true_tokens (FrozenSet[str]): Lowercase tokens coerced to True
        false_tokens (FrozenSet[str]): Lowercase tokens coerced to False
    """

    default_datetime_pattern: str = DEFAULT_DATETIME_PATTERN
    default_duration_pattern: str = DEFAULT_DURATION_PATTERN
    nulls_first: bool = True
    path_separator: str = DEFAULT_PATH_SEPARATOR
    true_tokens: FrozenSet[str] = field(default=TRUE_TOKENS)
    false_tokens: FrozenSet[str] = field(default=FALSE_TOKENS)

    def __post_init__(self):
        """Validate settings after initialization."""
        for name in ("default_datetime_pattern", "default_duration_pattern", "path_separator"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"{name} must be a non-empty string")

        if not isinstance(self.nulls_first, bool):
            raise ConfigurationError("nulls_first must be a boolean")

        for name in ("true_tokens", "false_tokens"):
            tokens = getattr(self, name)
            if isinstance(tokens, str) or not all(isinstance(t, str) for t in tokens):
                raise ConfigurationError(f"{name} must be a collection of strings")

        # Tokens are matched case-insensitively
        object.__setattr__(self, "true_tokens", frozenset(t.lower() for t in self.true_tokens))
        object.__setattr__(self, "false_tokens", frozenset(t.lower() for t in self.false_tokens))

        overlap = self.true_tokens & self.false_tokens
        if overlap:
            raise ConfigurationError(f"Boolean tokens are both true and false: {sorted(overlap)}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ComparisonSettings":
        """
        Create settings from a plain mapping.

        Args:
            values: Mapping of setting names to values

        Returns:
            ComparisonSettings with the given values over the defaults

        Raises:
            ConfigurationError: If a key is not a known setting or a value is invalid
        """
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ConfigurationError(f"Unknown settings: {sorted(unknown)}")
        return cls(**values)


DEFAULT_SETTINGS = ComparisonSettings()
