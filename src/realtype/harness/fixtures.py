"""Literal fixture suite exercised by ``realtype check``.

Each block mirrors one public operation.  The suite is rebuilt on every
call to :func:`build_suite`, so mutable fixtures are never shared
between runs.
"""

from __future__ import annotations

import array
import datetime
import math
import re
import weakref
from collections import OrderedDict

from realtype.core.aggregates import (
    all_items_have_the_same_type,
    count_real_types,
    every_item_has_a_unique_real_type,
)
from realtype.core.classifier import get_real_type, get_real_types_of_items
from realtype.core.markers import (
    UNDEFINED,
    BoxedBoolean,
    BoxedNumber,
    BoxedString,
    Symbol,
)
from realtype.core.probe import get_type, get_types_of_items
from realtype.harness.models import Case, CaseBlock


def known_types() -> tuple[object, ...]:
    """One value of each real type, in a fixed order."""
    return (
        True,
        42,
        "this is a string",
        [1, 1, 2, 3, 5, 8],
        {},
        lambda a, b: a * b,
        UNDEFINED,
        re.search(r"[aeiou]", "str", re.IGNORECASE),  # no match: None
        math.nan,
        math.inf,
        datetime.datetime.now(),
        re.compile(r"\d{4}"),
        set(),
        OrderedDict(),
        Symbol("abc"),
        ValueError("abc"),
        weakref.WeakSet(),
    )


KNOWN_COARSE_TYPES: tuple[str, ...] = (
    "boolean",
    "number",
    "string",
    "object",
    "object",
    "function",
    "undefined",
    "object",
    "number",
    "number",
    "object",
    "object",
    "object",
    "object",
    "symbol",
    "object",
    "object",
)

KNOWN_REAL_TYPES: tuple[str, ...] = (
    "boolean",
    "number",
    "string",
    "array",
    "object",
    "function",
    "undefined",
    "null",
    "NaN",
    "Infinity",
    "date",
    "regexp",
    "set",
    "map",
    "symbol",
    "error",
    "weakset",
)


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

def _get_type_block() -> CaseBlock:
    return CaseBlock(
        name="get_type",
        cases=(
            Case("Boolean", lambda: get_type(True), "boolean"),
            Case("Number", lambda: get_type(123), "number"),
            Case("String", lambda: get_type("whoo"), "string"),
            Case("Array", lambda: get_type([]), "object"),
            Case("Object", lambda: get_type({}), "object"),
            Case("Function", lambda: get_type(lambda: None), "function"),
            Case("Undefined", lambda: get_type(UNDEFINED), "undefined"),
            Case("Null", lambda: get_type(None), "object"),
        ),
    )


def _same_type_block() -> CaseBlock:
    return CaseBlock(
        name="all_items_have_the_same_type",
        cases=(
            Case(
                "All values are numbers",
                lambda: all_items_have_the_same_type([11, 12, 13]),
                True,
            ),
            Case(
                "All values are strings",
                lambda: all_items_have_the_same_type(["11", "12", "13"]),
                True,
            ),
            Case(
                "All values are strings but wait",
                lambda: all_items_have_the_same_type(["11", BoxedString("12"), "13"]),
                False,
            ),
            Case(
                "Values like a number",
                lambda: all_items_have_the_same_type([123, math.nan, math.inf]),
                False,
            ),
            Case(
                "Values like a number share a coarse type",
                lambda: len(set(get_types_of_items([123, math.nan, math.inf]))) == 1,
                True,
            ),
            Case(
                "Values like an object",
                lambda: all_items_have_the_same_type([{}]),
                True,
            ),
        ),
    )


def _types_of_items_block() -> CaseBlock:
    return CaseBlock(
        name="types_of_items",
        cases=(
            Case(
                "Check basic types",
                lambda: get_types_of_items(known_types()),
                list(KNOWN_COARSE_TYPES),
            ),
            Case(
                "Check real types",
                lambda: get_real_types_of_items(known_types()),
                list(KNOWN_REAL_TYPES),
            ),
        ),
    )


def _unique_type_block() -> CaseBlock:
    return CaseBlock(
        name="every_item_has_a_unique_real_type",
        cases=(
            Case(
                "All value types in the array are unique",
                lambda: every_item_has_a_unique_real_type([True, 123, "123"]),
                True,
            ),
            Case(
                "Two values have the same type",
                lambda: every_item_has_a_unique_real_type([True, 123, "123" == 123]),
                False,
            ),
            Case(
                "There are no repeated types in known types",
                lambda: every_item_has_a_unique_real_type(known_types()),
                True,
            ),
        ),
    )


def _count_block() -> CaseBlock:
    expected = [["boolean", 3], ["null", 1], ["object", 1]]
    return CaseBlock(
        name="count_real_types",
        cases=(
            Case(
                "Count unique types of array items",
                lambda: count_real_types([True, None, not None, not not None, {}]),
                expected,
            ),
            Case(
                "Counted unique types are sorted",
                lambda: count_real_types([{}, None, True, not None, not not None]),
                expected,
            ),
        ),
    )


def _extra_block() -> CaseBlock:
    typed_arrays = [array.array(code, [1, 2, 3]) for code in "bBhHiId"]
    return CaseBlock(
        name="extra",
        cases=(
            Case(
                "All infinities have same type",
                lambda: all_items_have_the_same_type([math.inf, +math.inf, -math.inf]),
                True,
            ),
            Case(
                "All typed arrays have unique types",
                lambda: every_item_has_a_unique_real_type(typed_arrays),
                True,
            ),
            Case(
                "All numbers are the same type",
                lambda: all_items_have_the_same_type([11, int("12"), 13, float("2.1")]),
                True,
            ),
            Case(
                "Items have some different types",
                lambda: all_items_have_the_same_type(
                    [11, BoxedString(), datetime.datetime.now(), re.compile(r"\d{4}")]
                ),
                False,
            ),
            Case(
                "Boxed number is a number",
                lambda: get_real_type(BoxedNumber(7)),
                "number",
            ),
            Case(
                "Boxed string is not a string",
                lambda: get_real_type(BoxedString("7")),
                "boxedstring",
            ),
            Case(
                "Boxed boolean is not a boolean",
                lambda: get_real_type(BoxedBoolean(True)),
                "boxedboolean",
            ),
            Case(
                "Huge integers are plain numbers",
                lambda: get_real_type(10**400),
                "number",
            ),
        ),
    )


def build_suite() -> tuple[CaseBlock, ...]:
    """Return a fresh copy of the full fixture suite, in run order."""
    return (
        _get_type_block(),
        _same_type_block(),
        _types_of_items_block(),
        _unique_type_block(),
        _count_block(),
        _extra_block(),
    )
