"""Domain models for realtype.

Models are immutable value objects with no behaviour beyond data
access.  They carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NamedTuple


# ---------------------------------------------------------------------------
# Grouped counts
# ---------------------------------------------------------------------------

class CountEntry(NamedTuple):
    """One ``(tag, count)`` row of a grouped result.

    A named tuple so that results compare equal to plain pairs, e.g.
    ``[("boolean", 3), ("null", 1)]``.
    """

    tag: str
    """Real type tag shared by the counted values."""

    count: int
    """Number of values carrying :attr:`tag`.  Always ``>= 1``."""


# ---------------------------------------------------------------------------
# Classification rule
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """A single ``predicate -> tag`` entry of the classifier's rule table."""

    tag: str
    """Tag returned when :attr:`predicate` accepts the value."""

    predicate: Callable[[Any], bool]
    """Structural check applied to the value."""

    def matches(self, value: object) -> bool:
        return self.predicate(value)
