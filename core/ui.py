"""Shared Rich console and styling for DepReview output.

Usage:
    from core.ui import console, print_error, success_message

    console.print(success_message("Dependencies"))
"""

import sys

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from .models import AnalysisError

SUCCESS_SYMBOL = "✔"
ERROR_SYMBOL = "✖"
ARROW = " ➝ "

DEPREVIEW_THEME = Theme({
    "success": "green",
    "warning": "red",
    "error": "bold red",
    "notice": "magenta",
    "key": "green",
    "header.category": "cyan underline",
    "header.current": "red underline",
    "header.latest": "green underline",
    "diff.major": "red",
    "diff.minor": "yellow",
    "diff.patch": "green",
    "diff.prerelease": "magenta",
    "diff.unknown": "dim",
    "detail": "dim",
})

# Single console instance shared by the pipeline and the CLI
console = Console(theme=DEPREVIEW_THEME, force_terminal=sys.stdout.isatty())


def make_console(**kwargs) -> Console:
    """Create a console carrying the DepReview theme."""
    return Console(theme=DEPREVIEW_THEME, **kwargs)


def success_message(label: str) -> Text:
    """A category label followed by a green check mark."""
    return Text.assemble(label, " ", (SUCCESS_SYMBOL, "success"))


def print_error(error: AnalysisError, out: Console | None = None) -> None:
    """Print a diagnostic for a dependency whose analysis failed."""
    out = out or console
    out.print(Text.assemble((f"{ERROR_SYMBOL} ", "error"), error.message))
    if error.detail:
        out.print(Text(f"  {error.detail}", style="detail"))


def print_notice(message: str, out: Console | None = None) -> None:
    """Print a status line in the notice color."""
    (out or console).print(Text(message, style="notice"))
