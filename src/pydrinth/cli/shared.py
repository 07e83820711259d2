"""
Shared utilities and constants for CLI commands.
"""

from typing import List, NoReturn, Optional

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme
import typer

from pydrinth.core import PydrinthError

pydrinth_theme = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "dim": "dim",
    }
)

# Shared console instances; results go to stdout, diagnostics to stderr
console = Console(theme=pydrinth_theme)
err_console = Console(theme=pydrinth_theme, stderr=True)

SEARCH_LIMIT = 10


def fail(error: PydrinthError) -> NoReturn:
    """Report ``error`` on stderr and exit with its status."""
    err_console.print(f"[error]✖ {escape(str(error))}[/error]")
    raise typer.Exit(error.exit_code) from error


def not_blank(value: str) -> str:
    """Option callback rejecting empty identifiers."""
    value = value.strip()
    if not value:
        raise typer.BadParameter("must not be empty")
    return value


def lowercase(value: str) -> str:
    return not_blank(value).lower()


def split_categories(values: Optional[List[str]]) -> List[str]:
    """Accept both ``-c a -c b`` and ``-c a,b``."""
    categories: List[str] = []
    for value in values or []:
        categories.extend(part.strip() for part in value.split(",") if part.strip())
    return categories
