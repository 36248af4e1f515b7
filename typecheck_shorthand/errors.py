"""
Error taxonomy for shorthand compilation.

Every failure surfaces to the caller as a subclass of ShorthandError. The
wrapping errors (ShorthandParseFailure, SchemaCompilationFailure) embed a
pretty-printed rendering of the document that failed, so the message alone
is enough to locate the problem in the user's shorthand.
"""

import json
from pprint import pformat
from typing import Any


class ShorthandError(ValueError):
    """Base class for all errors raised by typecheck_shorthand."""


class UnknownClassReference(ShorthandError):
    """
    An `instanceof` parameter names a class that is not registered.

    Attributes:
        token: The offending parameter, e.g. "promise" or "promise?"
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid instanceof parameter '{token}'")


class ShorthandParseFailure(ShorthandError):
    """
    Walking the shorthand tree failed.

    Attributes:
        shorthand: The shorthand mapping as supplied by the caller
        cause: The underlying exception
    """

    def __init__(self, shorthand: Any, cause: BaseException):
        self.shorthand = shorthand
        self.cause = cause
        super().__init__(
            f"Could not parse schema:\n\n{render_document(shorthand)}\n\n{cause}"
        )


class SchemaCompilationFailure(ShorthandError):
    """
    The schema validation compiler rejected a produced schema document.

    Attributes:
        schema: The schema document handed to the compiler
        cause: The underlying exception
    """

    def __init__(self, schema: Any, cause: BaseException):
        self.schema = schema
        self.cause = cause
        ShorthandError.__init__(self, _compilation_message(schema, cause))


class UnknownClassCompilationFailure(SchemaCompilationFailure, UnknownClassReference):
    """
    A schema document references an unregistered class.

    Catchable both as SchemaCompilationFailure and as UnknownClassReference.

    Attributes:
        schema: The schema document handed to the compiler
        cause: The UnknownClassReference raised by the class registry
        token: The offending `instanceof` parameter
    """

    def __init__(self, schema: Any, cause: UnknownClassReference):
        self.token = cause.token
        SchemaCompilationFailure.__init__(self, schema, cause)


def _compilation_message(schema: Any, cause: BaseException) -> str:
    return f"Could not compile schema:\n\n{render_document(schema)}\n\n{cause}"


def render_document(document: Any) -> str:
    """
    Pretty-print a shorthand or schema document for error messages.

    Fragment nodes are rendered through their schema form; anything else
    json cannot encode falls back to repr(). Documents json cannot render at
    all, such as mappings with tuple keys, are formatted with pprint.
    """
    try:
        return json.dumps(document, indent=2, default=_render_fallback)
    except (TypeError, ValueError):
        return pformat(document)


def _render_fallback(value: Any) -> Any:
    to_schema = getattr(value, "to_schema", None)
    if callable(to_schema):
        return to_schema()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return repr(value)
