"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Syntax-highlighted JSON
- Validation error tables with suggested fixes
- Success/failure indicators
"""

import json
from typing import Any, Dict, List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from rich.syntax import Syntax

from typecheck_shorthand.validation import ValidationError, suggest_fix


console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def print_json(data: Any, title: Optional[str] = None) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
    """
    if isinstance(data, str):
        json_str = data
    else:
        json_str = json.dumps(data, indent=2, default=repr)

    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=f"[bold]{title}[/bold]", border_style="cyan")
        console.print(panel)
    else:
        console.print(syntax)


def print_schema(schema: Dict, title: str = "Schema") -> None:
    """Print a schema with syntax highlighting."""
    print_json(schema, title)


def print_validation_errors(errors: List[ValidationError]) -> None:
    """
    Print validation errors as a table with a suggested fix per row.

    Args:
        errors: Validation errors from a ValidationResult
    """
    if not errors:
        return

    table = Table(title="Validation Errors", show_header=True, header_style="bold red")
    table.add_column("#", style="dim", width=4)
    table.add_column("Path", style="cyan")
    table.add_column("Problem", style="white")
    table.add_column("Fix", style="yellow")

    for i, error in enumerate(errors, 1):
        table.add_row(str(i), escape(error.path), escape(error.message), escape(suggest_fix(error)))

    console.print()
    console.print(table)
    console.print()


def print_separator() -> None:
    """Print a visual separator line."""
    console.print("[dim]" + "─" * 70 + "[/dim]")
