"""Custom exception hierarchy for realtype.

The core layer is total and never raises.  These exceptions belong to
the outer layers (harness and CLI) and all inherit from
:class:`RealTypeError`, so the CLI error boundary can render a clean
message without leaking internal stack traces.

Hierarchy
---------
RealTypeError
├── InvalidExpressionError
├── UnknownBlockError
└── EnvironmentError
"""

from __future__ import annotations


class RealTypeError(Exception):
    """Base exception for all realtype errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-line input ----------------------------------------------------

class InvalidExpressionError(RealTypeError):
    """Raised when a command-line expression is not a supported literal."""


class UnknownBlockError(RealTypeError):
    """Raised when a requested fixture block does not exist."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(RealTypeError):
    """Raised when an optional runtime dependency is not available."""
