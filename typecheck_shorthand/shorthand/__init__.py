"""
Shorthand parsing module.

This module turns the terse shorthand type grammar ("string?", "number[]",
"date", ...) into a tree of schema fragments that render to a JSON Schema
document.

Components:
    - fragments: Fragment node definitions (ObjectFragment, ArrayFragment, etc.)
    - parser: Token, variant list and object parsers
    - classes: Registry of native classes for the `instanceof` keyword

Example:
    ```python
    from typecheck_shorthand.shorthand import parse_schema, render_schema

    fragment = parse_schema({"name": "string", "avatar": "buffer?"})
    schema = render_schema(fragment)
    ```
"""

from typecheck_shorthand.shorthand.classes import CLASSES, is_class_name, lookup_class
from typecheck_shorthand.shorthand.fragments import (
    FragmentNode,
    ObjectFragment,
    RawFragment,
    raw,
    render_schema,
)
from typecheck_shorthand.shorthand.parser import (
    DIRECTIVE_PREFIX,
    ParseResult,
    parse_object_shorthand,
    parse_schema,
    parse_shorthand_type,
    parse_string_shorthand,
)

__all__ = [
    "CLASSES",
    "is_class_name",
    "lookup_class",
    "FragmentNode",
    "ObjectFragment",
    "RawFragment",
    "raw",
    "render_schema",
    "DIRECTIVE_PREFIX",
    "ParseResult",
    "parse_object_shorthand",
    "parse_schema",
    "parse_shorthand_type",
    "parse_string_shorthand",
]
