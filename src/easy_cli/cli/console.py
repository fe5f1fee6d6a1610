"""CLI console helpers with optional Rich support.

All user-facing output goes to **stderr**: in evaluated mode stdout
belongs to the calling shell's ``eval``.  Rich is imported lazily so
``--help`` and ``--version`` keep working without it.
"""

from __future__ import annotations

import sys
from typing import Any

from easy_cli.exceptions import EasyCliError, EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """``print``-compatible proxy that renders with Rich on stderr."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def error(self, exc: EasyCliError) -> None:
        """Render an :class:`EasyCliError` and its hint."""
        self.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            self.print(f"[yellow]Hint:[/yellow] {exc.hint}")


console = _ConsoleProxy()
