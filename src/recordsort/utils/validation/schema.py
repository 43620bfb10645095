"""
Schema Validation for serialized comparison criteria

This module provides JSON schema-based validation for criterion records, the
plain mappings a criterion can be built from and exported to. A record has
the keys "key", "type", "pattern" and "descending" (or the older spelling
"descending?"); only "key" is required.
"""

from collections.abc import Mapping
from typing import Any, Dict

from jsonschema import Draft7Validator

from .base import ValidationResult

CRITERION_RECORD_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "key": {"type": "string", "minLength": 1},
        # Values of these keys are normalized or parsed by the criterion itself
        "type": {},
        "pattern": {},
        "descending": {},
        "descending?": {},
    },
    "required": ["key"],
}


class CriterionSchemaValidator:
    """
    JSON Schema-based validator for criterion records.

    Keys outside the criterion schema are reported as warnings rather than
    errors, so records carrying extra bookkeeping keys are still accepted.

    Attributes:
        schema (Dict[str, Any]): JSON schema criterion records must satisfy
    """

    def __init__(self, schema: Dict[str, Any] = CRITERION_RECORD_SCHEMA):
        """
        Initialize a criterion schema validator.

        Args:
            schema: JSON schema to validate records against
        """
        Draft7Validator.check_schema(schema)
        self.schema = schema
        self._validator = Draft7Validator(schema)

    def validate_record(self, record: Any) -> ValidationResult:
        """
        Validate a criterion record against the schema.

        Args:
            record: Mapping to validate

        Returns:
            ValidationResult containing validation details and any errors or warnings

        Example:
            >>> validator = CriterionSchemaValidator()
            >>> validator.validate_record({"key": "name", "type": "string"}).is_valid
            True
            >>> validator.validate_record({"type": "string"}).errors
            ["Schema validation failed at '<record>': 'key' is a required property"]
        """
        if not isinstance(record, Mapping):
            return ValidationResult(
                is_valid=False,
                errors=[f"Criterion record must be a mapping, not {type(record).__name__}"],
                warnings=[],
            )

        instance = dict(record)
        errors = []
        for error in sorted(self._validator.iter_errors(instance), key=lambda e: list(e.path)):
            location = "/".join(str(p) for p in error.path) or "<record>"
            errors.append(f"Schema validation failed at '{location}': {error.message}")

        properties = self.schema.get("properties", {})
        warnings = [f"Ignoring unknown criterion key: {k}" for k in instance if k not in properties]

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"key": instance.get("key")},
        )
