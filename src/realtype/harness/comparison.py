"""Structural equality used to compare actual and expected results."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeGuard

_SCALAR_SEQUENCES = (str, bytes, bytearray)


def _is_compound(value: object) -> TypeGuard[Sequence[object]]:
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES)


def are_equal(actual: object, expected: object) -> bool:
    """Compare two results element by element.

    Sequences (other than strings and bytes) are equal when they have the
    same length and pairwise-equal items, whatever their concrete type,
    so ``[CountEntry("null", 1)]`` equals ``[["null", 1]]``.  Anything
    else is compared with ``==``.
    """
    if _is_compound(actual) and _is_compound(expected):
        return len(actual) == len(expected) and all(
            are_equal(a, b) for a, b in zip(actual, expected)
        )
    if _is_compound(actual) or _is_compound(expected):
        return False
    return bool(actual == expected)
