"""
Tests for criterion record schema validation.
"""

import pytest
from jsonschema.exceptions import SchemaError

from recordsort.utils.validation import (
    CRITERION_RECORD_SCHEMA,
    CriterionSchemaValidator,
)


@pytest.fixture
def validator() -> CriterionSchemaValidator:
    """Fixture providing a criterion schema validator."""
    return CriterionSchemaValidator()


def test_valid_record(validator):
    """Test validation of a complete record."""
    result = validator.validate_record(
        {"key": "a", "type": "integer", "pattern": None, "descending?": "true"}
    )
    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []
    assert result.context == {"key": "a"}


def test_boolean_descending(validator):
    """Test that descending may be a real boolean."""
    assert validator.validate_record({"key": "a", "descending": True}).is_valid


def test_missing_key(validator):
    """Test that the key is required."""
    result = validator.validate_record({"type": "string"})
    assert not result.is_valid
    assert result.errors == ["Schema validation failed at '<record>': 'key' is a required property"]


def test_invalid_key(validator):
    """Test that an empty key is reported with its location."""
    result = validator.validate_record({"key": "", "type": 3})
    assert not result.is_valid
    assert len(result.errors) == 1
    assert result.errors[0].startswith("Schema validation failed at 'key'")


def test_lenient_values(validator):
    """Test that type, pattern and descending values are left to the criterion."""
    result = validator.validate_record({"key": "a", "type": 5, "pattern": 7, "descending": 1})
    assert result.is_valid
    assert result.errors == []


def test_not_a_mapping(validator):
    """Test that non-mapping records are rejected."""
    result = validator.validate_record(["key", "a"])
    assert not result.is_valid
    assert "must be a mapping" in result.errors[0]


def test_unknown_keys_warn(validator):
    """Test that unknown keys produce warnings, not errors."""
    result = validator.validate_record({"key": "a", "order": "desc"})
    assert result.is_valid
    assert result.warnings == ["Ignoring unknown criterion key: order"]


def test_invalid_schema():
    """Test that an invalid schema is rejected up front."""
    with pytest.raises(SchemaError):
        CriterionSchemaValidator({"type": "nonsense"})


def test_default_schema_requires_key():
    """Test the default schema definition."""
    assert CRITERION_RECORD_SCHEMA["required"] == ["key"]
