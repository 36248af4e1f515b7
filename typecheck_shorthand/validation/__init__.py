"""
Validation layer module.

This module compiles schema documents produced from shorthand into
jsonschema validators and runs them, reporting every error with its
location, expectation and actual value.

Components:
    - keywords: `nullable` type handling, the `instanceof` keyword, `uuid` format
    - compiler: Schema document -> validator, with enriched failures
    - validator: Run a validator and collect errors
    - error_formatter: Convert validation errors to human-readable messages

Validation Flow:
    1. Check the document against the Draft 7 meta-schema
    2. Resolve `instanceof` parameters against the class registry
    3. Build the extended validator with the shared format checker
    4. Collect all validation errors for a value

Example:
    ```python
    from typecheck_shorthand.validation import compile_schema, validate

    validator = compile_schema({"type": "object", "properties": {"age": {"type": "integer"}}})
    result = validate({"age": "not a number"}, validator)
    if not result.is_valid:
        for error in result.errors:
            print(f"  - {error.path}: {error.message}")
    ```
"""

from typecheck_shorthand.validation.compiler import compile_schema
from typecheck_shorthand.validation.validator import (
    validate,
    validate_json,
    quick_validate,
    ValidationResult,
    ValidationError,
    format_validation_errors
)
from typecheck_shorthand.validation.error_formatter import suggest_fix

__all__ = [
    "compile_schema",
    "validate",
    "validate_json",
    "quick_validate",
    "ValidationResult",
    "ValidationError",
    "format_validation_errors",
    "suggest_fix",
]
