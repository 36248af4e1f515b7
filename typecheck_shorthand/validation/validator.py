"""
Validation runner with detailed error reporting.

This module runs a compiled validator against a value and collects every
error (not just the first) into plain dataclasses that are easy to print
or assert on.

Usage:
    ```python
    from typecheck_shorthand.validation import compile_schema, validate

    validator = compile_schema(schema)
    result = validate({"age": "old"}, validator)
    if not result.is_valid:
        for error in result.errors:
            print(f"Error: {error.message}")
    ```
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, List

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """
    Represents a single validation error.

    Attributes:
        path: Path to the error location (e.g., ".user.address.zipcode")
        message: Human-readable error message
        schema_path: Path in schema that failed
        validator: Keyword that failed (e.g., "type", "instanceof")
        expected: What was expected
        actual: What was found
    """
    path: str
    message: str
    schema_path: str
    validator: str
    expected: Any
    actual: Any


@dataclass
class ValidationResult:
    """
    Result of validating a value against a compiled schema.

    Attributes:
        is_valid: Whether the value is valid
        errors: List of validation errors (empty if valid)
        value: The value that was validated (None if JSON text failed to parse)
    """
    is_valid: bool
    errors: List[ValidationError]
    value: Any


def validate(value: Any, validator: Any) -> ValidationResult:
    """
    Validate a Python value with a compiled validator.

    Args:
        value: Value to validate; may hold non-JSON objects such as bytes or
            dates for `instanceof` checks
        validator: Validator returned by compile_schema()

    Returns:
        ValidationResult: Validation result with errors if any

    Example:
        ```python
        validator = compile_schema({
            "type": "object",
            "properties": {"name": {"type": "string"}},
            "required": ["name"]
        })

        assert validate({"name": "Alice"}, validator).is_valid
        assert not validate({"age": 25}, validator).is_valid
        ```
    """
    errors = [_convert_jsonschema_error(error, value) for error in validator.iter_errors(value)]

    if errors:
        logger.debug(f"Validation failed with {len(errors)} error(s)")

    return ValidationResult(is_valid=not errors, errors=errors, value=value)


def validate_json(output: str, validator: Any) -> ValidationResult:
    """
    Validate JSON text; a decode failure is reported as a single error.

    Args:
        output: JSON string to validate
        validator: Validator returned by compile_schema()

    Returns:
        ValidationResult: Validation result with errors if any
    """
    try:
        parsed = json.loads(output)
    except json.JSONDecodeError as e:
        return ValidationResult(
            is_valid=False,
            errors=[
                ValidationError(
                    path="",
                    message=f"Invalid JSON: {e.msg}",
                    schema_path="",
                    validator="json",
                    expected="valid JSON",
                    actual=f"parse error at position {e.pos}"
                )
            ],
            value=None
        )

    return validate(parsed, validator)


def _convert_jsonschema_error(error: Any, data: Any) -> ValidationError:
    """
    Convert jsonschema ValidationError to our ValidationError.

    Args:
        error: jsonschema ValidationError
        data: The data being validated

    Returns:
        ValidationError: Our error representation
    """
    path = "." + ".".join(str(p) for p in error.path) if error.path else "root"

    # Walk to the offending value
    actual = data
    for key in error.path:
        if isinstance(actual, dict):
            actual = actual.get(key, "MISSING")
        elif isinstance(actual, list):
            try:
                actual = actual[int(key)]
            except (IndexError, ValueError):
                actual = "INVALID_INDEX"
        else:
            actual = "UNKNOWN"

    schema_path = "." + ".".join(str(p) for p in error.schema_path) if error.schema_path else "root"

    if isinstance(error.schema, dict):
        expected = error.schema.get(error.validator, "see schema")
    else:
        expected = error.schema

    return ValidationError(
        path=path,
        message=error.message,
        schema_path=schema_path,
        validator=error.validator,
        expected=expected,
        actual=actual
    )


def format_validation_errors(errors: List[ValidationError]) -> str:
    """
    Format validation errors as human-readable string.

    Args:
        errors: List of validation errors

    Returns:
        str: Formatted error message

    Example:
        ```python
        result = validate(value, validator)
        if not result.is_valid:
            print(format_validation_errors(result.errors))
            # Output:
            # Validation failed with 1 error(s):
            #   1. At .createdAt: '2024-01-01' is not an instance of date
            #      Expected: date
            #      Got: 2024-01-01
        ```
    """
    if not errors:
        return "No validation errors"

    lines = [f"Validation failed with {len(errors)} error(s):"]

    for i, error in enumerate(errors, 1):
        lines.append(f"\n  {i}. At {error.path}: {error.message}")
        lines.append(f"     Expected: {error.expected}")
        lines.append(f"     Got: {error.actual}")

    return "\n".join(lines)


def quick_validate(value: Any, validator: Any) -> bool:
    """
    Quick validation - just returns True/False.

    Args:
        value: Value to validate
        validator: Validator returned by compile_schema()

    Returns:
        bool: True if valid, False otherwise
    """
    return validator.is_valid(value)
