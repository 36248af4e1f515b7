"""
Error formatter - convert validation errors to user-friendly messages.

This module provides utilities for formatting validation errors in a way
that helps users understand what went wrong and how to fix it.
"""

from typecheck_shorthand.validation.validator import ValidationError


def suggest_fix(error: ValidationError) -> str:
    """
    Suggest how to fix a validation error.

    Args:
        error: Validation error

    Returns:
        str: Suggested fix
    """
    if error.validator == "required":
        return f"Add the missing field at {error.path}, or mark it optional with '?'"

    elif error.validator == "type":
        return f"Change {error.path} to type {error.expected}"

    elif error.validator == "instanceof":
        return f"Pass a {str(error.expected).rstrip('?')} instance at {error.path}"

    elif error.validator == "minLength":
        return f"{error.path} must not be empty"

    elif error.validator == "minItems":
        return f"{error.path} needs at least one item"

    elif error.validator == "const":
        return f"{error.path} must be exactly {error.expected}"

    elif error.validator == "format":
        return f"{error.path} must be a valid {error.expected}"

    else:
        return "Check the schema requirements"
