"""Real-type classifier.

:func:`get_real_type` refines the coarse tag from
:func:`~realtype.core.probe.get_type` into a disjoint, fine-grained tag.

Decision order (first match wins):

1. **Numbers**: ``NaN`` when the value is not equal to itself,
   ``Infinity`` for either infinity, ``number`` otherwise.
2. **Scalar coarse tags**: ``string``, ``boolean``, ``undefined``,
   ``symbol`` and ``function`` are returned verbatim.
3. **Structural rules**: the :data:`RULES` table, evaluated in order.
4. **Descriptor fallback**: :func:`type_descriptor`.

Boxed quirk
-----------
:class:`~realtype.core.markers.BoxedNumber` classifies as ``number``
while :class:`~realtype.core.markers.BoxedString` and
:class:`~realtype.core.markers.BoxedBoolean` keep their own
``boxedstring`` / ``boxedboolean`` tags.  Existing fixtures depend on
this asymmetry.
"""

from __future__ import annotations

import array
import datetime
import decimal
import math
import re
import types
import weakref
from collections import UserString
from collections.abc import Iterable, Mapping, Sequence, Set
from typing import Final

from realtype.core.markers import BoxedBoolean, BoxedNumber, BoxedString
from realtype.core.models import ClassificationRule
from realtype.core.probe import (
    BOOLEAN,
    FUNCTION,
    NUMBER,
    OBJECT,
    STRING,
    SYMBOL,
    UNDEFINED_TAG,
    get_type,
)

NAN: Final = "NaN"
INFINITY: Final = "Infinity"

_VERBATIM_TAGS: Final[frozenset[str]] = frozenset(
    {STRING, BOOLEAN, UNDEFINED_TAG, SYMBOL, FUNCTION}
)

# Sequences that are text, raw buffers or typed arrays rather than arrays.
_NON_ARRAY_SEQUENCES: Final = (
    str,
    UserString,
    bytes,
    bytearray,
    memoryview,
    array.array,
    range,
)

_WEAK_MAPPINGS: Final = (weakref.WeakKeyDictionary, weakref.WeakValueDictionary)


# ---------------------------------------------------------------------------
# Structural predicates
# ---------------------------------------------------------------------------

def _is_null(value: object) -> bool:
    return value is None


def _is_array(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _NON_ARRAY_SEQUENCES)


def _is_boxed_number(value: object) -> bool:
    return isinstance(value, BoxedNumber)


def _is_date(value: object) -> bool:
    # datetime.datetime is a datetime.date subclass.
    return isinstance(value, datetime.date)


def _is_weakset(value: object) -> bool:
    return isinstance(value, weakref.WeakSet)


def _is_set(value: object) -> bool:
    # Any strong set-like collection, dict key and item views included.
    return isinstance(value, Set) and not isinstance(value, weakref.WeakSet)


def _is_weakmap(value: object) -> bool:
    return isinstance(value, _WEAK_MAPPINGS)


def _is_map(value: object) -> bool:
    # A plain dict is a record ("object"); every other strong mapping is a map.
    return (
        isinstance(value, Mapping)
        and type(value) is not dict
        and not isinstance(value, _WEAK_MAPPINGS)
    )


def _is_regexp(value: object) -> bool:
    return isinstance(value, re.Pattern)


def _is_error(value: object) -> bool:
    return isinstance(value, BaseException)


RULES: Final[tuple[ClassificationRule, ...]] = (
    ClassificationRule("null", _is_null),
    ClassificationRule("array", _is_array),
    ClassificationRule(NUMBER, _is_boxed_number),
    ClassificationRule("date", _is_date),
    ClassificationRule("weakset", _is_weakset),
    ClassificationRule("set", _is_set),
    ClassificationRule("weakmap", _is_weakmap),
    ClassificationRule("map", _is_map),
    ClassificationRule("regexp", _is_regexp),
    ClassificationRule("error", _is_error),
)
"""Structural rules for the ``object`` bucket, in priority order."""


# ---------------------------------------------------------------------------
# Descriptor fallback
# ---------------------------------------------------------------------------

_DESCRIPTORS: Final[dict[type, str]] = {
    dict: OBJECT,
    types.SimpleNamespace: OBJECT,
    decimal.Decimal: "decimal",
    BoxedString: "boxedstring",
    BoxedBoolean: "boxedboolean",
    object: OBJECT,
}

_FLOAT_ARRAY_TAGS: Final[dict[str, str]] = {
    "f": "float32array",
    "d": "float64array",
}

_UNICODE_TYPECODES: Final[frozenset[str]] = frozenset({"u", "w"})


def _typed_array_tag(value: array.array) -> str:
    """Name a typed array after its element type, e.g. ``uint16array``."""
    typecode = value.typecode
    if typecode in _FLOAT_ARRAY_TAGS:
        return _FLOAT_ARRAY_TAGS[typecode]
    if typecode in _UNICODE_TYPECODES:
        return "unicodearray"
    bits = value.itemsize * 8
    # Lower-case type codes are signed.
    signed = typecode.islower()
    if bits == 64:
        return "bigint64array" if signed else "biguint64array"
    return f"int{bits}array" if signed else f"uint{bits}array"


def type_descriptor(value: object) -> str:
    """Return the lower-cased, most specific runtime descriptor of *value*.

    Walks the MRO of ``type(value)``.  Typed arrays are named after
    their element type, registered classes use their registered name,
    and built-in classes use their own name.  Every MRO ends with
    ``object``, so user-defined classes land in the ``object`` bucket.
    """
    if isinstance(value, array.array):
        return _typed_array_tag(value)
    for klass in type(value).__mro__:
        registered = _DESCRIPTORS.get(klass)
        if registered is not None:
            return registered
        if klass.__module__ == "builtins":
            return klass.__name__.lower()
    return OBJECT


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def _number_tag(value: object) -> str:
    # Comparisons instead of math.isnan/isinf: huge ints overflow float().
    if value != value:
        return NAN
    if abs(value) == math.inf:  # type: ignore[arg-type]
        return INFINITY
    return NUMBER


def get_real_type(value: object) -> str:
    """Return the real type tag of *value*.  Total and deterministic."""
    coarse = get_type(value)
    if coarse == NUMBER:
        return _number_tag(value)
    if coarse in _VERBATIM_TAGS:
        return coarse
    for rule in RULES:
        if rule.matches(value):
            return rule.tag
    return type_descriptor(value)


def get_real_types_of_items(values: Iterable[object]) -> list[str]:
    """Return the real type of every item, in order."""
    return [get_real_type(item) for item in values]
