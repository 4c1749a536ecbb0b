"""Tests for the CLI reporters (cli/report.py).

Reporters render into in-memory streams; no terminal is involved.
"""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from realtype.cli.report import PlainReporter, RichReporter, make_reporter
from realtype.harness.models import CaseResult, SuiteReport


def _ok(name: str = "Boolean") -> CaseResult:
    return CaseResult(
        block="get_type", name=name, passed=True, expected="boolean", actual="boolean"
    )


def _fail() -> CaseResult:
    return CaseResult(
        block="get_type", name="Null", passed=False, expected="object", actual="null"
    )


def _crash() -> CaseResult:
    return CaseResult(
        block="get_type",
        name="Crash",
        passed=False,
        expected="object",
        actual=None,
        error="RuntimeError: kaput",
    )


def _rich_reporter() -> tuple[RichReporter, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, width=100, color_system=None, force_terminal=False)
    return RichReporter(console=console), buffer


# ---------------------------------------------------------------------------
# PlainReporter
# ---------------------------------------------------------------------------

class TestPlainReporter:
    def test_block_heading(self) -> None:
        stream = io.StringIO()
        PlainReporter(stream).block_started("get_type")
        assert stream.getvalue() == "# get_type\n\n"

    def test_ok_line(self) -> None:
        stream = io.StringIO()
        PlainReporter(stream).case_finished(_ok())
        assert stream.getvalue() == "[OK] Boolean\n\n"

    def test_fail_shows_expected_and_actual(self) -> None:
        stream = io.StringIO()
        PlainReporter(stream).case_finished(_fail())
        lines = stream.getvalue().splitlines()
        assert lines[:5] == ["[FAIL] Null", "Expected:", "'object'", "Actual:", "'null'"]

    def test_crash_shows_error(self) -> None:
        stream = io.StringIO()
        PlainReporter(stream).case_finished(_crash())
        output = stream.getvalue()
        assert "Error:" in output
        assert "RuntimeError: kaput" in output
        assert "Actual:" not in output

    def test_summary(self) -> None:
        stream = io.StringIO()
        PlainReporter(stream).suite_finished(SuiteReport(results=(_ok(), _fail())))
        assert stream.getvalue() == "1 passed, 1 failed, 2 total\n"

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        PlainReporter().block_started("x")
        assert capsys.readouterr().out == "# x\n\n"


# ---------------------------------------------------------------------------
# RichReporter
# ---------------------------------------------------------------------------

class TestRichReporter:
    def test_ok_line_is_not_markup(self) -> None:
        reporter, buffer = _rich_reporter()
        reporter.case_finished(_ok("Array [] is an object"))
        assert "[OK] Array [] is an object" in buffer.getvalue()

    def test_block_heading(self) -> None:
        reporter, buffer = _rich_reporter()
        reporter.block_started("count_real_types")
        assert "# count_real_types" in buffer.getvalue()

    def test_fail_shows_expected_and_actual(self) -> None:
        reporter, buffer = _rich_reporter()
        reporter.case_finished(_fail())
        output = buffer.getvalue()
        assert "[FAIL] Null" in output
        assert "Expected:" in output
        assert "'object'" in output
        assert "Actual:" in output
        assert "'null'" in output

    def test_crash_shows_error(self) -> None:
        reporter, buffer = _rich_reporter()
        reporter.case_finished(_crash())
        assert "RuntimeError: kaput" in buffer.getvalue()

    def test_summary(self) -> None:
        reporter, buffer = _rich_reporter()
        reporter.suite_finished(SuiteReport(results=(_ok(),)))
        assert "1 passed, 0 failed, 1 total" in buffer.getvalue()


class TestMakeReporter:
    def test_prefers_rich(self) -> None:
        assert isinstance(make_reporter(), RichReporter)
