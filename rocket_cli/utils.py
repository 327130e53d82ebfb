"""Shared utility functions for the Rocket CLI.

Provides project-name validation, environment-gated debug tracing and
Rich-based console reporting.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rocket_cli.config import DEBUG_ENV_VAR

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------

_NAME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9_-]*")


def is_valid_name(name: str) -> bool:
    """Return ``True`` if *name* is usable as a project name.

    A valid name starts with an ASCII letter, followed by any number of
    ASCII letters, digits, underscores or hyphens.

    Examples::

        is_valid_name("hello")      -> True
        is_valid_name("my-app_2")   -> True
        is_valid_name("2fast")      -> False
        is_valid_name("bad name")   -> False
        is_valid_name("")           -> False
    """
    return _NAME_PATTERN.fullmatch(name) is not None


# ---------------------------------------------------------------------------
# Debug tracing
# ---------------------------------------------------------------------------


def debug_enabled() -> bool:
    """Return ``True`` when the debug environment toggle is set."""
    return DEBUG_ENV_VAR in os.environ


def debug(message: str) -> None:
    """Print a trace line prefixed with the caller's file and line number.

    Only prints when ``ROCKET_CLI_DEBUG`` is present in the environment.
    The variable is checked on every call, so toggling it at run time takes
    effect immediately.
    """
    if not debug_enabled():
        return

    frame = sys._getframe(1)
    location = f"{Path(frame.f_code.co_filename).name}:{frame.f_lineno}"
    console.print(
        f"[{location}] {message}", style="dim", markup=False, highlight=False, soft_wrap=True
    )


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)
