"""
Command-line interface module.

This module provides a rich terminal interface for typecheck_shorthand using
Typer and Rich.

Commands:
    - compile: Compile a shorthand file into a JSON Schema document
    - validate: Validate a JSON file against a shorthand file

Example Usage:
    ```bash
    # Print the schema for a shorthand file
    typecheck-shorthand compile --shorthand user.json

    # Save it
    typecheck-shorthand compile --shorthand user.json --output user.schema.json

    # Check a document
    typecheck-shorthand validate --json alice.json --shorthand user.json --show-schema
    ```
"""

from .main import app

__all__ = ["app"]
