"""
CLI command implementations.

This module contains the business logic for each CLI command:
- compile: Shorthand file -> schema document
- validate: Check a JSON file against a shorthand file
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .display import (
    print_header,
    print_success,
    print_error,
    print_info,
    print_json,
    print_schema,
    print_validation_errors,
    print_separator,
    console
)


def load_shorthand_file(shorthand_path: Path) -> Dict[str, Any]:
    """
    Load a shorthand mapping from a JSON file.

    Args:
        shorthand_path: Path to shorthand JSON file

    Returns:
        Parsed shorthand mapping

    Raises:
        ValueError: If the file doesn't exist, isn't valid JSON, or isn't an object
    """
    if not shorthand_path.exists():
        raise ValueError(f"Shorthand file not found: {shorthand_path}")

    try:
        with open(shorthand_path) as f:
            shorthand = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in shorthand file: {e}")

    if not isinstance(shorthand, dict):
        raise ValueError("Shorthand file must contain a JSON object")

    return shorthand


def compile_command(shorthand_path: Path, output_path: Optional[Path]) -> None:
    """
    Execute the compile command.

    Args:
        shorthand_path: Path to shorthand JSON file
        output_path: Optional path to save the schema document
    """
    from typecheck_shorthand import compile_shorthand
    from typecheck_shorthand.validation import compile_schema

    print_header("typecheck-shorthand - Compile")

    try:
        shorthand = load_shorthand_file(shorthand_path)
        print_success(f"Loaded shorthand from: {shorthand_path}")
    except Exception as e:
        print_error(f"Failed to load shorthand: {e}")
        raise SystemExit(1)

    schema = compile_shorthand(shorthand)

    # Surface compiler errors now rather than on first use
    compile_schema(schema)

    print_schema(schema, title="Compiled Schema")

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(schema, f, indent=2)
        print_success(f"Saved schema to: {output_path}")


def validate_command(
    json_path: Path,
    shorthand_path: Path,
    show_schema: bool
) -> None:
    """
    Execute the validate command.

    Args:
        json_path: Path to JSON file to validate
        shorthand_path: Path to shorthand JSON file
        show_schema: Whether to display the compiled schema
    """
    from typecheck_shorthand import build_type_check

    print_header("typecheck-shorthand - Validate JSON")

    try:
        shorthand = load_shorthand_file(shorthand_path)
        print_success(f"Loaded shorthand from: {shorthand_path}")
    except Exception as e:
        print_error(f"Failed to load shorthand: {e}")
        raise SystemExit(1)

    check, _, parsed = build_type_check(shorthand)

    if show_schema:
        print_schema(parsed, title="Compiled Schema")

    if not json_path.exists():
        print_error(f"JSON file not found: {json_path}")
        raise SystemExit(1)

    try:
        with open(json_path) as f:
            data = json.load(f)
        print_success(f"Loaded JSON from: {json_path}")
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON: {e}")
        raise SystemExit(1)

    print_json(data, title="Input JSON")

    print_separator()
    print_info("Validating...")

    result = check(data)

    console.print()
    if result.is_valid:
        print_success("Validation passed!")
    else:
        print_error("Validation failed")
        print_validation_errors(result.errors)
        raise SystemExit(1)
