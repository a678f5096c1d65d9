"""
Rich console output for the DelvForge CLI.
"""

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

console = Console()

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "info": Style(color="cyan"),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]))
    console.print()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(Text(f"ℹ {message}", style=STYLES["info"]))


def print_table(title: str, columns: list[str], rows: list[list[str]]) -> None:
    """Print rows in a rounded table; the first column is emphasized."""
    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold cyan")
    for index, column in enumerate(columns):
        table.add_column(column, style="white bold" if index == 0 else "bright_black")
    for row in rows:
        table.add_row(*row)
    console.print(table)
