"""Shallow type probe: the coarse, built-in style type query.

:func:`get_type` answers with one of a fixed set of coarse tags and
never looks inside the ``object`` bucket: ``None``, lists, dicts,
dates and boxed primitives all come back as ``"object"``.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from typing import Final

from realtype.core.markers import UNDEFINED, Symbol

BOOLEAN: Final = "boolean"
NUMBER: Final = "number"
STRING: Final = "string"
UNDEFINED_TAG: Final = "undefined"
SYMBOL: Final = "symbol"
FUNCTION: Final = "function"
OBJECT: Final = "object"

COARSE_TAGS: Final[frozenset[str]] = frozenset(
    {BOOLEAN, NUMBER, STRING, UNDEFINED_TAG, SYMBOL, FUNCTION, OBJECT}
)


def get_type(value: object) -> str:
    """Return the coarse type tag of *value*.

    Order matters: ``bool`` is checked before numbers because it is an
    ``int`` subclass, and symbols before callables.
    """
    if value is UNDEFINED:
        return UNDEFINED_TAG
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, numbers.Real):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, Symbol):
        return SYMBOL
    if callable(value):
        return FUNCTION
    return OBJECT


def get_types_of_items(values: Iterable[object]) -> list[str]:
    """Return the coarse type of every item, in order."""
    return [get_type(item) for item in values]
