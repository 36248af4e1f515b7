"""
Shorthand parser - converts shorthand type descriptions to schema fragments.

This module is the main entry point for compiling shorthand into the
fragment tree. A shorthand mapping describes an object, field by field:

    {
        "id": "uuid",
        "name": "string!",
        "age": "number?",
        "tags": "string[]",
        "createdAt": "date",
        "kind": ["true", "false"],
        "$additionalProperties": False,
    }

Token grammar, suffixes read right to left:
    ?      field may be null or absent (not listed in "required")
    !      non-empty: minLength 1 for strings, minItems 1 for arrays
    []     array of the preceding token
    uuid   string with format "uuid"
    true / false   boolean literal
    string / any   string / unconstrained
    buffer, regexp, function, date   native class check (instanceof)
    anything else  passed through as the JSON type name

Keys starting with "$" are schema-level directives and are copied onto the
object schema with the prefix removed.

Usage:
    ```python
    from typecheck_shorthand.shorthand import parse_schema, render_schema

    fragment = parse_schema({"name": "string", "age": "number?"})
    schema = render_schema(fragment)
    # {"type": "object", "properties": {...}, "required": ["name"]}
    ```
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from typecheck_shorthand.errors import ShorthandParseFailure
from typecheck_shorthand.shorthand.classes import is_class_name
from typecheck_shorthand.shorthand.fragments import (
    AnyFragment,
    ArrayFragment,
    BooleanFragment,
    ClassInstanceFragment,
    FragmentNode,
    ObjectFragment,
    PrimitiveFragment,
    RawFragment,
    StringFragment,
    UnionFragment,
)

logger = logging.getLogger(__name__)

DIRECTIVE_PREFIX = "$"


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing one shorthand value.

    Attributes:
        fragment: The parsed fragment, or a tuple of fragments for a variant
            list parsed as internal
        is_required: Whether the enclosing object must list this field as required
    """
    fragment: Any
    is_required: bool


def parse_schema(shorthand: Mapping) -> ObjectFragment:
    """
    Parse a shorthand mapping into an ObjectFragment.

    Args:
        shorthand: Mapping of field name to shorthand value

    Returns:
        ObjectFragment: Root of the fragment tree

    Raises:
        ShorthandParseFailure: If anything goes wrong while walking the
            shorthand; the message embeds the pretty-printed shorthand

    Example:
        ```python
        fragment = parse_schema({"name": "string", "tags": "string[]"})
        fragment.required  # ("name", "tags")
        ```
    """
    try:
        return parse_object_shorthand(shorthand)
    except Exception as e:
        logger.error(f"Failed to parse shorthand: {e}")
        raise ShorthandParseFailure(shorthand, e) from e


def parse_object_shorthand(shorthand: Mapping) -> ObjectFragment:
    """
    Parse a mapping of field name to shorthand value.

    Fields are visited in mapping order. Directive keys bypass the
    properties/required bookkeeping; every other field lands in
    `properties` and, when required, in `required`.

    Args:
        shorthand: Mapping of field name to shorthand value

    Returns:
        ObjectFragment: Object fragment; `required` is None if no field is required

    Raises:
        TypeError: If the shorthand is not a mapping or a key is not a string
    """
    if not isinstance(shorthand, Mapping):
        raise TypeError(
            f"Shorthand must be a mapping of field names, got {type(shorthand).__name__}"
        )

    properties = {}
    required = []
    directives = {}

    for key, value in shorthand.items():
        if not isinstance(key, str):
            raise TypeError(f"Field names must be strings, got {key!r}")

        if key.startswith(DIRECTIVE_PREFIX):
            # Directive: attach to the object itself
            directives[key[len(DIRECTIVE_PREFIX):]] = parse_shorthand_type(
                value, is_internal=True
            ).fragment
            continue

        result = parse_shorthand_type(value)
        properties[key] = result.fragment

        if result.is_required:
            required.append(key)

        logger.debug(f"Parsed field {key!r}: required={result.is_required}")

    return ObjectFragment(
        properties=properties,
        required=tuple(required) or None,
        directives=directives,
    )


def parse_shorthand_type(value: Any, is_internal: bool = False) -> ParseResult:
    """
    Parse any shorthand value by dispatching on its shape.

    Args:
        value: A token string, a list of variants, a nested mapping, or a
            pre-built fragment
        is_internal: When True a variant list is returned as a bare tuple of
            fragments instead of being wrapped in a union

    Returns:
        ParseResult: Fragment plus required-ness

    Note:
        Variants are always parsed as internal, and a variant list is only
        required when every variant is required.
    """
    if isinstance(value, str):
        return parse_string_shorthand(value)

    if isinstance(value, (list, tuple)):
        results = [parse_shorthand_type(item, is_internal=True) for item in value]
        fragments = tuple(r.fragment for r in results)
        is_required = all(r.is_required for r in results)

        if is_internal:
            return ParseResult(fragment=fragments, is_required=is_required)

        return ParseResult(fragment=UnionFragment(options=fragments), is_required=is_required)

    if isinstance(value, FragmentNode):
        return ParseResult(fragment=value, is_required=not value.nullable)

    if isinstance(value, Mapping):
        fragment = parse_object_shorthand(value)
        return ParseResult(fragment=fragment, is_required=not fragment.nullable)

    fragment = RawFragment(schema=value)
    return ParseResult(fragment=fragment, is_required=not fragment.nullable)


def parse_string_shorthand(token: str) -> ParseResult:
    """
    Parse a single shorthand token such as "string?", "number[]" or "date".

    Args:
        token: Shorthand token

    Returns:
        ParseResult: Fragment plus required-ness; a token is required unless
            it ends with "?"

    Example:
        ```python
        parse_string_shorthand("string!").fragment.to_schema()
        # {"type": "string", "minLength": 1}

        parse_string_shorthand("Date?").fragment.to_schema()
        # {"instanceof": "date?"}
        ```
    """
    is_required = not token.endswith("?")

    nullable = False
    base = token

    if base.endswith("?"):
        nullable = True
        base = base[:-1]

    # Class checks carry the "?" inside the keyword parameter
    if is_class_name(base.lower()):
        return ParseResult(fragment=ClassInstanceFragment(param=token.lower()), is_required=is_required)

    require_presence = False

    if base.endswith("!"):
        require_presence = True
        base = base[:-1]

    if base.endswith("[]"):
        items = parse_shorthand_type(base[:-2]).fragment
        fragment = ArrayFragment(
            items=items,
            min_items=1 if require_presence else None,
            is_nullable=nullable,
        )

    elif base == "uuid":
        fragment = StringFragment(format="uuid", is_nullable=nullable)

    elif base in ("true", "false"):
        fragment = BooleanFragment(const=base == "true", is_nullable=nullable)

    elif base == "string":
        fragment = StringFragment(
            min_length=1 if require_presence else None,
            is_nullable=nullable,
        )

    elif base == "any":
        fragment = AnyFragment(is_nullable=nullable)

    else:
        # "!" has no effect here
        fragment = PrimitiveFragment(type_name=base, is_nullable=nullable)

    return ParseResult(fragment=fragment, is_required=is_required)
