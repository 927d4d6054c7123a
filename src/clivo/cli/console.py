"""CLI console helpers with optional Rich support.

Rich is imported on demand so that the parser, ``--help`` and
``--version`` keep working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from clivo.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance (stderr unless told otherwise)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain stderr print.

        Pass ``markup=False`` for user-supplied text that may contain
        square brackets.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, markup=markup, highlight=False)

    def print_labelled(self, label: str, text: str) -> None:
        """Print a markup *label* followed by *text* rendered verbatim.

        *text* may carry user-supplied option names, so it is escaped
        before Rich parses the line.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(label, text, file=sys.stderr)
            return
        from rich.markup import escape

        rich_console.print(f"{label} {escape(text)}", highlight=False)


console = _ConsoleProxy()
