"""Harness runner: executes case blocks and reports every outcome.

The runner is the harness's error boundary.  A case whose computation
raises is recorded as a failure and the run continues with the next
case; nothing short of ``KeyboardInterrupt`` stops a run early.

Guarantees
----------
* No rendering: all output goes through the injected
  :class:`~realtype.harness.protocols.Reporter`.
* Results are reported in block order, then case order.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from realtype.exceptions import UnknownBlockError
from realtype.harness.comparison import are_equal
from realtype.harness.models import Case, CaseBlock, CaseResult, SuiteReport
from realtype.harness.protocols import Reporter

logger = structlog.get_logger(__name__)


class HarnessRunner:
    """Runs case blocks against an optional reporter.

    Parameters
    ----------
    reporter:
        Any object satisfying the :class:`Reporter` protocol, or
        ``None`` to run silently and only return the report.
    """

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter: Reporter | None = reporter

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, blocks: Iterable[CaseBlock]) -> SuiteReport:
        """Run every case of every block and return the collected report."""
        results: list[CaseResult] = []
        for block in blocks:
            if self._reporter is not None:
                self._reporter.block_started(block.name)
            for case in block.cases:
                result = self.run_case(block.name, case)
                results.append(result)
                if self._reporter is not None:
                    self._reporter.case_finished(result)

        report = SuiteReport(results=tuple(results))
        logger.debug(
            "suite.finished",
            total=report.total,
            passed=report.passed,
            failed=report.failed,
        )
        if self._reporter is not None:
            self._reporter.suite_finished(report)
        return report

    @staticmethod
    def run_case(block: str, case: Case) -> CaseResult:
        """Compute one case and compare it with its expected value."""
        try:
            actual = case.compute()
        except Exception as exc:
            error = f"{type(exc).__name__}: {exc}"
            logger.warning("case.errored", block=block, case=case.name, error=error)
            return CaseResult(
                block=block,
                name=case.name,
                passed=False,
                expected=case.expected,
                actual=None,
                error=error,
            )

        passed = are_equal(actual, case.expected)
        logger.debug("case.finished", block=block, case=case.name, passed=passed)
        return CaseResult(
            block=block,
            name=case.name,
            passed=passed,
            expected=case.expected,
            actual=actual,
        )


# ---------------------------------------------------------------------------
# Block selection
# ---------------------------------------------------------------------------

def select_blocks(
    blocks: Sequence[CaseBlock],
    names: Sequence[str] | None,
) -> list[CaseBlock]:
    """Return the blocks named in *names*, in suite order.

    ``None`` or an empty selection keeps every block.

    Raises
    ------
    UnknownBlockError
        If a requested name matches no block.
    """
    if not names:
        return list(blocks)

    known = {block.name for block in blocks}
    unknown = [name for name in names if name not in known]
    if unknown:
        raise UnknownBlockError(
            f"Unknown block: {', '.join(unknown)}",
            hint="Available blocks: " + ", ".join(block.name for block in blocks),
        )

    wanted = set(names)
    return [block for block in blocks if block.name in wanted]
