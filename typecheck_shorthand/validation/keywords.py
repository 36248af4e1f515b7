"""
Custom keywords and format checks for compiled shorthand schemas.

Shorthand schemas are Draft 7 documents with two additions:

    nullable    `{"type": "number", "nullable": true}` also accepts None.
                Only the `type` check is relaxed; `const`, `format` and
                length keywords keep their Draft 7 meaning.
    instanceof  `{"instanceof": "date?"}` checks native class membership.
                The parameter is "<name>" or "<name>?"; the trailing "?"
                accepts None. Names come from the shorthand class registry.

FORMAT_CHECKER swaps the `uuid` check jsonschema ships with (built on
uuid.UUID, which tolerates braces and stray hyphens) for a strict pattern:
hyphenated hex groups with an optional "urn:uuid:" prefix.
"""

import re
from typing import Any, Dict, Iterator

from jsonschema import Draft7Validator, FormatChecker, validators
from jsonschema.exceptions import ValidationError

from typecheck_shorthand.shorthand.classes import lookup_class

_DRAFT7_TYPE = Draft7Validator.VALIDATORS["type"]

# Keywords whose value is a schema or a list of schemas
_SUBSCHEMA_KEYWORDS = {
    "items", "additionalItems", "additionalProperties", "contains",
    "propertyNames", "not", "if", "then", "else", "allOf", "anyOf", "oneOf",
}

# Keywords whose value maps names to schemas
_SUBSCHEMA_MAPS = {"properties", "patternProperties", "definitions", "dependencies"}


def nullable_type(validator, types, instance, schema) -> Iterator[ValidationError]:
    """`type` keyword that lets None through when the node is nullable."""
    if instance is None and schema.get("nullable") is True:
        return
    yield from _DRAFT7_TYPE(validator, types, instance, schema)


def instanceof(validator, param, instance, schema) -> Iterator[ValidationError]:
    """
    `instanceof` keyword.

    Raises:
        UnknownClassReference: If the parameter names an unregistered class
    """
    classes, nullable = lookup_class(param)

    if nullable and instance is None:
        return

    if not isinstance(instance, classes):
        name = param.rstrip("?")
        yield ValidationError(f"{instance!r} is not an instance of {name}")


def iter_class_params(schema: Any) -> Iterator[Any]:
    """
    Yield every `instanceof` parameter in a schema document.

    Only schema positions are visited, so a property that happens to be
    named "instanceof" is not mistaken for the keyword.
    """
    if not isinstance(schema, dict):
        return

    if "instanceof" in schema:
        yield schema["instanceof"]

    for key, value in schema.items():
        if key in _SUBSCHEMA_MAPS and isinstance(value, dict):
            for subschema in value.values():
                yield from iter_class_params(subschema)
        elif key in _SUBSCHEMA_KEYWORDS:
            subschemas = value if isinstance(value, list) else [value]
            for subschema in subschemas:
                yield from iter_class_params(subschema)


_UUID_PATTERN = re.compile(
    r"^(?:urn:uuid:)?[0-9a-f]{8}-(?:[0-9a-f]{4}-){3}[0-9a-f]{12}$", re.IGNORECASE
)

FORMAT_CHECKER = FormatChecker()


@FORMAT_CHECKER.checks("uuid")
def is_uuid(instance: Any) -> bool:
    """Hyphenated UUID text with an optional "urn:uuid:" prefix."""
    if not isinstance(instance, str):
        return True
    return _UUID_PATTERN.fullmatch(instance) is not None


ShorthandValidator = validators.extend(
    Draft7Validator,
    validators={"type": nullable_type, "instanceof": instanceof},
)


def create_validator(schema: Dict[str, Any]) -> Any:
    """Instantiate the extended validator with the shared format checker."""
    return ShorthandValidator(schema, format_checker=FORMAT_CHECKER)
