"""CLI console helpers with optional Rich support.

Rich is imported lazily so that bootstrap paths (``--help``,
``--version``) and the plain-text fallbacks keep working when Rich is
not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from realtype.exceptions import EnvironmentError


def load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console, on stdout unless *stderr* is set."""
    console_class = load_rich_console_class()
    return console_class(stderr=stderr)


def rich_available() -> bool:
    try:
        load_rich_console_class()
    except EnvironmentError:
        return False
    return True


class _ConsoleProxy:
    """Minimal ``print``-compatible stderr proxy with Rich fallback."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain stderr print.

        Pass ``markup=False`` for text that may contain square brackets.
        """
        try:
            rich_console = get_rich_console(stderr=True)
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, markup=markup)


console = _ConsoleProxy()
