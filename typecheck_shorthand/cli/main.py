"""
Main CLI entry point using Typer.

This module defines the command-line interface for typecheck_shorthand. It
provides two commands: compile and validate.
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from .commands import compile_command, validate_command
from .display import print_error


# Create Typer app
app = typer.Typer(
    name="typecheck-shorthand",
    help="typecheck-shorthand - Compile type shorthand into JSON Schema",
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("compile")
def compile_file(
    shorthand: Annotated[
        Path,
        typer.Option("--shorthand", "-s", help="Path to shorthand JSON file", exists=True, file_okay=True, dir_okay=False)
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Path to save the compiled schema")
    ] = None,
) -> None:
    """
    Compile a shorthand file into a JSON Schema document.

    Example:
        typecheck-shorthand compile \\
            --shorthand user.json \\
            --output user.schema.json
    """
    try:
        compile_command(shorthand_path=shorthand, output_path=output)
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("validate")
def validate(
    json_file: Annotated[
        Path,
        typer.Option("--json", "-j", help="Path to JSON file to validate", exists=True, file_okay=True, dir_okay=False)
    ],
    shorthand: Annotated[
        Path,
        typer.Option("--shorthand", "-s", help="Path to shorthand JSON file", exists=True, file_okay=True, dir_okay=False)
    ],
    show_schema: Annotated[
        bool,
        typer.Option("--show-schema", help="Display the compiled schema")
    ] = False,
) -> None:
    """
    Validate a JSON file against a shorthand file.

    Example:
        typecheck-shorthand validate \\
            --json alice.json \\
            --shorthand user.json \\
            --show-schema
    """
    try:
        validate_command(
            json_path=json_file,
            shorthand_path=shorthand,
            show_schema=show_schema
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """
    typecheck-shorthand - Compile type shorthand into JSON Schema.

    Describe fields as "string?", "number[]" or "date" and get a Draft 7
    schema and validator out.
    """
    if version:
        from typecheck_shorthand import __version__
        typer.echo(f"typecheck-shorthand version {__version__}")
        raise typer.Exit()

    if verbose:
        from typecheck_shorthand.utils import setup_logging
        setup_logging(level="DEBUG")

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for poetry script."""
    app()


if __name__ == "__main__":
    cli()
