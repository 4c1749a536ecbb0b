"""Harness data model: cases, blocks and their outcomes.

All models are frozen dataclasses.  A :class:`Case` holds a zero-argument
callable rather than a precomputed value so that the runner can contain
any exception raised while computing it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Case:
    """A single named assertion: ``compute()`` must equal ``expected``."""

    name: str
    compute: Callable[[], Any]
    expected: Any


@dataclass(frozen=True, slots=True)
class CaseBlock:
    """A named, ordered group of cases (rendered as ``# name``)."""

    name: str
    cases: tuple[Case, ...]

    def __len__(self) -> int:
        return len(self.cases)


@dataclass(frozen=True, slots=True)
class CaseResult:
    """Outcome of running one :class:`Case`."""

    block: str
    """Name of the enclosing block."""

    name: str
    """Name of the case."""

    passed: bool

    expected: Any

    actual: Any
    """Computed value, or ``None`` when computing raised."""

    error: str | None = None
    """``"<ExceptionType>: <message>"`` when computing raised, else ``None``."""


@dataclass(frozen=True, slots=True)
class SuiteReport:
    """Ordered results of a full run.  Truthy when every case passed."""

    results: tuple[CaseResult, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def failures(self) -> tuple[CaseResult, ...]:
        return tuple(result for result in self.results if not result.passed)

    def __bool__(self) -> bool:
        return self.failed == 0
