"""
typecheck_shorthand: Compact Type Shorthand to JSON Schema

typecheck_shorthand compiles a terse, hand-writable type grammar into JSON
Schema documents and validators. Instead of writing a schema by hand, a
field is described with a short token:

    {
        "id": "uuid",
        "name": "string!",
        "nickname": "string?",
        "scores": "number[]",
        "avatar": "buffer?",
        "createdAt": "date",
        "$additionalProperties": False,
    }

Key Features:
    - "?" marks a field optional and nullable, "!" marks it non-empty
    - "[]" arrays, variant lists for unions, nested mappings for objects
    - Native class checks (buffer, regexp, function, date) via `instanceof`
    - `$`-prefixed keys set schema-level options
    - Errors embed the shorthand or schema that caused them

Quick Start:
    ```python
    from typecheck_shorthand import build_type_check

    check, validator, parsed = build_type_check({
        "name": "string",
        "age": "number?",
        "tags": "string[]",
    })

    result = check({"name": "Alice", "tags": ["admin"]})
    print(result.is_valid)
    ```

Architecture:
    1. Shorthand Parser: shorthand mapping -> fragment tree -> schema document
    2. Schema Compiler: schema document -> jsonschema validator
    3. Validator: run the validator, collect every error
"""

__version__ = "0.1.0"

from typecheck_shorthand.api import TypeCheck, build_type_check, compile_shorthand, type_check  # noqa: F401
from typecheck_shorthand.errors import (  # noqa: F401
    SchemaCompilationFailure,
    ShorthandError,
    ShorthandParseFailure,
    UnknownClassCompilationFailure,
    UnknownClassReference,
)
from typecheck_shorthand.shorthand import raw  # noqa: F401

__all__ = [
    "TypeCheck",
    "build_type_check",
    "compile_shorthand",
    "type_check",
    "raw",
    "ShorthandError",
    "ShorthandParseFailure",
    "SchemaCompilationFailure",
    "UnknownClassReference",
    "UnknownClassCompilationFailure",
]
