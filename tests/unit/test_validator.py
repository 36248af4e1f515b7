"""
Unit tests for validator.
"""

import datetime

import pytest
from typecheck_shorthand import compile_shorthand
from typecheck_shorthand.validation import (
    compile_schema,
    format_validation_errors,
    quick_validate,
    suggest_fix,
    validate,
    validate_json,
)


@pytest.fixture
def person_validator():
    """Validator for a small person shorthand."""
    return compile_schema(compile_shorthand({
        "name": "string!",
        "age": "integer?",
        "tags": "string[]",
        "birthday": "date?",
    }))


class TestValidator:
    """Test running compiled validators."""

    def test_validate_valid_value(self, person_validator):
        """Test validating a valid value."""
        value = {"name": "Alice", "tags": []}

        result = validate(value, person_validator)

        assert result.is_valid is True
        assert len(result.errors) == 0
        assert result.value is value

    def test_validate_missing_required_field(self, person_validator):
        """Test validating a value with a missing required field."""
        result = validate({"name": "Alice"}, person_validator)

        assert result.is_valid is False
        assert len(result.errors) == 1

        error = result.errors[0]
        assert error.validator == "required"
        assert error.path == "root"
        assert "tags" in error.message

    def test_validate_wrong_type(self, person_validator):
        """Test the error points at the offending field."""
        result = validate({"name": "Alice", "tags": [], "age": "old"}, person_validator)

        assert result.is_valid is False
        error = result.errors[0]
        assert error.path == ".age"
        assert error.validator == "type"
        assert error.expected == "integer"
        assert error.actual == "old"

    def test_validate_collects_all_errors(self, person_validator):
        """Test every error is reported, not just the first."""
        result = validate({"name": "", "tags": [1, 2]}, person_validator)

        paths = sorted(error.path for error in result.errors)
        assert paths == [".name", ".tags.0", ".tags.1"]

    def test_validate_instanceof(self, person_validator):
        """Test native objects are checked in place."""
        value = {"name": "Alice", "tags": [], "birthday": datetime.date(1990, 5, 17)}
        assert validate(value, person_validator).is_valid

        value["birthday"] = "1990-05-17"
        result = validate(value, person_validator)
        assert result.errors[0].validator == "instanceof"
        assert result.errors[0].expected == "date?"

    def test_validate_json_text(self, person_validator):
        """Test JSON text is decoded before validation."""
        result = validate_json('{"name": "Alice", "tags": ["a"]}', person_validator)

        assert result.is_valid is True
        assert result.value == {"name": "Alice", "tags": ["a"]}

    def test_validate_json_invalid_syntax(self, person_validator):
        """Test invalid JSON syntax is reported as a single error."""
        result = validate_json('{invalid json}', person_validator)

        assert result.is_valid is False
        assert len(result.errors) == 1
        assert result.errors[0].validator == "json"
        assert "Invalid JSON" in result.errors[0].message
        assert result.value is None

    def test_quick_validate(self, person_validator):
        """Test quick validation (bool only)."""
        assert quick_validate({"name": "Alice", "tags": []}, person_validator) is True
        assert quick_validate({"name": "Alice"}, person_validator) is False

    def test_format_validation_errors(self, person_validator):
        """Test formatting validation errors."""
        result = validate({"name": "Alice", "tags": "a"}, person_validator)
        formatted = format_validation_errors(result.errors)

        assert formatted.startswith("Validation failed with 1 error(s):")
        assert "At .tags" in formatted

    def test_format_no_errors(self):
        """Test formatting an empty error list."""
        assert format_validation_errors([]) == "No validation errors"


class TestErrorFormatter:
    """Test per-error formatting helpers."""

    def test_suggest_fix_required(self, person_validator):
        """Test the required suggestion mentions the optional marker."""
        error = validate({"name": "Alice"}, person_validator).errors[0]

        assert "'?'" in suggest_fix(error)

    def test_suggest_fix_instanceof(self, person_validator):
        """Test the instanceof suggestion names the class without the marker."""
        value = {"name": "Alice", "tags": [], "birthday": 0}
        error = validate(value, person_validator).errors[0]

        assert suggest_fix(error) == "Pass a date instance at .birthday"
