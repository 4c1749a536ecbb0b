"""Harness reporters for the CLI layer.

Two implementations of :class:`~realtype.harness.protocols.Reporter`:

* :class:`RichReporter`: colored output via a Rich console.
* :class:`PlainReporter`: plain text, used when Rich is missing.

Output format::

    # block name

    [OK] case name

    [FAIL] case name
    Expected:
    ...
    Actual:
    ...

Reporters only render.  They never decide pass/fail and never raise
on a failed case.
"""

from __future__ import annotations

import sys
from typing import IO, Any

from realtype.cli.console import get_rich_console
from realtype.exceptions import EnvironmentError
from realtype.harness.models import CaseResult, SuiteReport
from realtype.harness.protocols import Reporter


def _summary(report: SuiteReport) -> str:
    return f"{report.passed} passed, {report.failed} failed, {report.total} total"


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------

class PlainReporter:
    """Write harness output as plain text to *stream* (stdout by default)."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream: IO[str] = stream if stream is not None else sys.stdout

    def _write(self, *parts: object) -> None:
        print(*parts, file=self._stream)

    def block_started(self, name: str) -> None:
        self._write(f"# {name}")
        self._write()

    def case_finished(self, result: CaseResult) -> None:
        if result.passed:
            self._write(f"[OK] {result.name}")
            self._write()
            return
        self._write(f"[FAIL] {result.name}")
        self._write("Expected:")
        self._write(repr(result.expected))
        if result.error is not None:
            self._write("Error:")
            self._write(result.error)
        else:
            self._write("Actual:")
            self._write(repr(result.actual))
        self._write()

    def suite_finished(self, report: SuiteReport) -> None:
        self._write(_summary(report))


# ---------------------------------------------------------------------------
# Rich
# ---------------------------------------------------------------------------

class RichReporter:
    """Render harness output with Rich.

    Parameters
    ----------
    console:
        A ``rich.console.Console`` to render to.  Defaults to a new
        stdout console.
    """

    def __init__(self, console: Any | None = None) -> None:
        try:
            from rich.pretty import Pretty
            from rich.text import Text
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._pretty: Any = Pretty
        self._text: Any = Text
        self._console: Any = console if console is not None else get_rich_console()

    def block_started(self, name: str) -> None:
        self._console.print(self._text(f"# {name}", style="bold"))
        self._console.print()

    def case_finished(self, result: CaseResult) -> None:
        if result.passed:
            self._console.print(
                self._text.assemble(("[OK]", "bold green"), " ", result.name)
            )
            self._console.print()
            return

        self._console.print(
            self._text.assemble(("[FAIL]", "bold red"), " ", result.name)
        )
        self._console.print(self._text("Expected:", style="dim"))
        self._console.print(self._pretty(result.expected))
        if result.error is not None:
            self._console.print(self._text("Error:", style="dim"))
            self._console.print(self._text(result.error, style="red"))
        else:
            self._console.print(self._text("Actual:", style="dim"))
            self._console.print(self._pretty(result.actual))
        self._console.print()

    def suite_finished(self, report: SuiteReport) -> None:
        style = "bold green" if report else "bold red"
        self._console.print(self._text(_summary(report), style=style))


def make_reporter() -> Reporter:
    """Return a :class:`RichReporter`, or a :class:`PlainReporter` without Rich."""
    try:
        return RichReporter()
    except EnvironmentError:
        return PlainReporter()
