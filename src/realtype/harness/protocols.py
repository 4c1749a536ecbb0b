"""Protocols consumed by the harness runner.

The runner never renders anything itself.  Output is owned by a
:class:`Reporter` supplied by the caller, which keeps the harness a
pure library and lets the presentation layer be swapped freely.
"""

from __future__ import annotations

from typing import Protocol

from realtype.harness.models import CaseResult, SuiteReport


class Reporter(Protocol):
    """Contract for harness output sinks.

    Any object implementing these three methods satisfies the protocol
    structurally (no explicit inheritance required).  Implementations
    must not raise: a reporter failure would abort the run.
    """

    def block_started(self, name: str) -> None:
        """Called once before the first case of block *name* runs."""
        ...  # pragma: no cover

    def case_finished(self, result: CaseResult) -> None:
        """Called after every case, passed or not."""
        ...  # pragma: no cover

    def suite_finished(self, report: SuiteReport) -> None:
        """Called once after the last case."""
        ...  # pragma: no cover
