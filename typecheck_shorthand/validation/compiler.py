"""
Schema compiler - hands finished schema documents to jsonschema.

Compilation checks the document against the Draft 7 meta-schema, resolves
every `instanceof` parameter against the class registry, and returns a
ready-to-use validator. Unknown type names ("promise", "date!") and unknown
classes therefore fail here rather than on the first validation.

Usage:
    ```python
    from typecheck_shorthand.validation import compile_schema

    validator = compile_schema({"type": "object", "properties": {}})
    validator.is_valid({})  # True
    ```
"""

import logging
from typing import Any, Dict

from typecheck_shorthand.errors import (
    SchemaCompilationFailure,
    UnknownClassCompilationFailure,
    UnknownClassReference,
)
from typecheck_shorthand.shorthand.classes import lookup_class
from typecheck_shorthand.validation.keywords import (
    ShorthandValidator,
    create_validator,
    iter_class_params,
)

logger = logging.getLogger(__name__)


def compile_schema(schema: Dict[str, Any]) -> Any:
    """
    Compile a schema document into a validator.

    Args:
        schema: JSON Schema document, usually rendered from a fragment tree

    Returns:
        A jsonschema validator instance (ShorthandValidator)

    Raises:
        SchemaCompilationFailure: If the document is rejected; the message
            embeds the pretty-printed document and the original error is
            chained as __cause__
        UnknownClassCompilationFailure: If an `instanceof` parameter names an
            unregistered class; also an UnknownClassReference

    Example:
        ```python
        validator = compile_schema({"instanceof": "date"})
        validator.is_valid(datetime.date.today())  # True
        ```
    """
    logger.debug("Compiling schema document")

    try:
        ShorthandValidator.check_schema(schema)

        for param in iter_class_params(schema):
            lookup_class(param)

        validator = create_validator(schema)

    except UnknownClassReference as e:
        logger.error(f"Failed to compile schema: {e}")
        raise UnknownClassCompilationFailure(schema, e) from e

    except Exception as e:
        logger.error(f"Failed to compile schema: {e}")
        raise SchemaCompilationFailure(schema, e) from e

    logger.debug("Schema compiled")
    return validator
