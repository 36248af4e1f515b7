"""
High-level Python API for typecheck_shorthand.

These functions are what a build-time host calls: parse the shorthand,
compile the schema once, and hand back something that can check values.
"""

import logging
from typing import Any, Callable, Dict, Mapping, NamedTuple

from typecheck_shorthand.shorthand import parse_schema, render_schema
from typecheck_shorthand.validation import ValidationResult, compile_schema, validate

logger = logging.getLogger(__name__)


class TypeCheck(NamedTuple):
    """
    Compiled shorthand, ready for splicing into a caller.

    Attributes:
        check: Runs the validator on a value and returns a ValidationResult
        validator: The compiled jsonschema validator
        parsed: The schema document the validator was compiled from
    """
    check: Callable[[Any], ValidationResult]
    validator: Any
    parsed: Dict[str, Any]


def compile_shorthand(shorthand: Mapping) -> Dict[str, Any]:
    """
    Parse a shorthand mapping and render its schema document.

    Args:
        shorthand: Mapping of field name to shorthand value

    Returns:
        Dict: JSON Schema document

    Raises:
        ShorthandParseFailure: If the shorthand cannot be parsed

    Example:
        ```python
        compile_shorthand({"name": "string", "age": "number?"})
        # {
        #     "type": "object",
        #     "properties": {
        #         "name": {"type": "string"},
        #         "age": {"type": "number", "nullable": True}
        #     },
        #     "required": ["name"]
        # }
        ```
    """
    return render_schema(parse_schema(shorthand))


def build_type_check(shorthand: Mapping) -> TypeCheck:
    """
    Parse and compile a shorthand mapping.

    Args:
        shorthand: Mapping of field name to shorthand value

    Returns:
        TypeCheck: (check, validator, parsed) triple

    Raises:
        ShorthandParseFailure: If the shorthand cannot be parsed
        SchemaCompilationFailure: If the produced schema is rejected

    Example:
        ```python
        check, validator, parsed = build_type_check({"id": "uuid", "tags": "string[]"})
        result = check({"id": "0f8fad5b-d9cb-469f-a165-70867728950e", "tags": []})
        assert result.is_valid
        ```
    """
    parsed = compile_shorthand(shorthand)
    validator = compile_schema(parsed)

    logger.debug(f"Built type check for fields: {list(parsed['properties'])}")

    def check(value: Any) -> ValidationResult:
        return validate(value, validator)

    return TypeCheck(check=check, validator=validator, parsed=parsed)


def type_check(value: Any, shorthand: Mapping) -> ValidationResult:
    """
    Check a value against a shorthand mapping in one call.

    Compiles on every call; use build_type_check() to reuse a validator.
    """
    return build_type_check(shorthand).check(value)
