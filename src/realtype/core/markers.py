"""Host value markers that Python does not provide natively.

The classifier distinguishes a handful of value kinds that have no
built-in Python counterpart:

* :data:`UNDEFINED`: the "absent, never assigned" marker, kept apart
  from ``None`` (which plays the role of an explicit null).
* :class:`Symbol`: a unique, identity-compared token with an optional
  description.
* Boxed primitives: :class:`BoxedNumber`, :class:`BoxedString` and
  :class:`BoxedBoolean` wrap a primitive in an ordinary object.

Boxed quirk
-----------
Boxed values are structurally objects.  The classifier does **not**
unbox them, with one deliberate exception: :class:`BoxedNumber`
classifies as ``number``.  A boxed string therefore never shares a tag
with a plain string.  This asymmetry is relied upon by the fixture
suite and must be preserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


class _Undefined:
    """Type of the :data:`UNDEFINED` singleton."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()
"""Marker for a value that was never set."""


# ---------------------------------------------------------------------------
# Symbol
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False, slots=True)
class Symbol:
    """Unique token.  Two symbols are equal only when they are the same object."""

    description: str | None = None

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"


# ---------------------------------------------------------------------------
# Boxed primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BoxedNumber:
    """Object wrapper around a number.  Classifies as ``number``."""

    value: int | float = 0


@dataclass(frozen=True, slots=True)
class BoxedString:
    """Object wrapper around a string.  Classifies as ``boxedstring``."""

    value: str = ""


@dataclass(frozen=True, slots=True)
class BoxedBoolean:
    """Object wrapper around a boolean.  Classifies as ``boxedboolean``."""

    value: bool = False
