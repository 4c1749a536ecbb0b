"""Harness layer: literal fixtures, a non-fatal runner and reporting hooks.

Rules
-----
* May import from ``core``; never from ``cli``.
* No user-facing output: rendering is delegated to a ``Reporter``.
* A failing or crashing case never stops a run.
"""

from realtype.harness.comparison import are_equal
from realtype.harness.fixtures import build_suite
from realtype.harness.models import Case, CaseBlock, CaseResult, SuiteReport
from realtype.harness.protocols import Reporter
from realtype.harness.runner import HarnessRunner, select_blocks

__all__: list[str] = [
    "Case",
    "CaseBlock",
    "CaseResult",
    "HarnessRunner",
    "Reporter",
    "SuiteReport",
    "are_equal",
    "build_suite",
    "select_blocks",
]
