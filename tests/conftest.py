"""Shared pytest fixtures and configuration for the realtype test suite.

Guidelines
----------
* Core tests must be pure: no side effects, no mocking.
* CLI tests call ``main(argv)`` directly and capture output.
* Logging configuration is restored after every test.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from realtype.harness.models import CaseResult, SuiteReport


class RecordingReporter:
    """Reporter that records every callback for later assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def block_started(self, name: str) -> None:
        self.events.append(("block", name))

    def case_finished(self, result: CaseResult) -> None:
        self.events.append(("case", result))

    def suite_finished(self, report: SuiteReport) -> None:
        self.events.append(("suite", report))


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Undo ``configure_logging`` side effects on the root logger."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package_logger = logging.getLogger("realtype")
    package_level = package_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package_logger.setLevel(package_level)
