"""Tests for the aggregate operations (core/aggregates.py).

Every test is a pure function call: no I/O, no mocking.
"""

from __future__ import annotations

import datetime
import itertools
import math
import re

import pytest

from realtype.core.aggregates import (
    all_items_have_the_same_type,
    count_real_types,
    every_item_has_a_unique_real_type,
)
from realtype.core.markers import UNDEFINED, BoxedString
from realtype.core.models import CountEntry


# ---------------------------------------------------------------------------
# all_items_have_the_same_type
# ---------------------------------------------------------------------------

class TestAllItemsHaveTheSameType:
    def test_empty_is_true(self) -> None:
        assert all_items_have_the_same_type([]) is True

    @pytest.mark.parametrize("value", [1, None, math.nan, UNDEFINED, {}])
    def test_single_item_is_true(self, value: object) -> None:
        assert all_items_have_the_same_type([value]) is True

    def test_numbers(self) -> None:
        assert all_items_have_the_same_type([11, 12, 13])

    def test_mixed_numeric_sources(self) -> None:
        assert all_items_have_the_same_type([11, int("12"), 13, float("2.1")])

    def test_strings(self) -> None:
        assert all_items_have_the_same_type(["11", "12", "13"])

    def test_boxed_string_breaks_homogeneity(self) -> None:
        assert not all_items_have_the_same_type(["11", BoxedString("12"), "13"])

    def test_number_nan_infinity_differ(self) -> None:
        assert not all_items_have_the_same_type([123, math.nan, math.inf])

    def test_infinities(self) -> None:
        assert all_items_have_the_same_type([math.inf, +math.inf, -math.inf])

    def test_mixed_objects(self) -> None:
        values = [11, BoxedString(), datetime.datetime.now(), re.compile(r"\d{4}")]
        assert not all_items_have_the_same_type(values)

    def test_accepts_generator(self) -> None:
        assert all_items_have_the_same_type(n for n in range(5))

    def test_does_not_mutate_input(self) -> None:
        values = [1, "a"]
        all_items_have_the_same_type(values)
        assert values == [1, "a"]


# ---------------------------------------------------------------------------
# every_item_has_a_unique_real_type
# ---------------------------------------------------------------------------

class TestEveryItemHasAUniqueRealType:
    def test_empty_is_true(self) -> None:
        assert every_item_has_a_unique_real_type([]) is True

    def test_unique(self) -> None:
        assert every_item_has_a_unique_real_type([True, 123, "123"])

    def test_two_booleans(self) -> None:
        assert not every_item_has_a_unique_real_type([True, 123, False])

    def test_null_and_undefined_are_distinct(self) -> None:
        assert every_item_has_a_unique_real_type([None, UNDEFINED])

    def test_dict_and_list_are_distinct(self) -> None:
        assert every_item_has_a_unique_real_type([{}, []])

    def test_accepts_generator(self) -> None:
        assert not every_item_has_a_unique_real_type(x for x in (1, 2))


# ---------------------------------------------------------------------------
# count_real_types
# ---------------------------------------------------------------------------

class TestCountRealTypes:
    def test_grouped_counts(self) -> None:
        result = count_real_types([True, None, not None, not not None, {}])
        assert result == [("boolean", 3), ("null", 1), ("object", 1)]

    def test_independent_of_input_order(self) -> None:
        values = [True, None, not None, not not None, {}]
        expected = [("boolean", 3), ("null", 1), ("object", 1)]
        for permutation in itertools.permutations(values):
            assert count_real_types(permutation) == expected

    def test_entries_are_count_entries(self) -> None:
        (entry,) = count_real_types([1])
        assert isinstance(entry, CountEntry)
        assert entry.tag == "number"
        assert entry.count == 1

    def test_empty(self) -> None:
        assert count_real_types([]) == []

    def test_code_point_order(self) -> None:
        result = count_real_types(["a", math.nan, [], math.inf, 1])
        assert [entry.tag for entry in result] == [
            "Infinity",
            "NaN",
            "array",
            "number",
            "string",
        ]

    def test_counts_sum_to_length(self) -> None:
        values = [1, 2, "a", None, None, [], {}, math.nan]
        result = count_real_types(values)
        assert sum(entry.count for entry in result) == len(values)

    def test_no_duplicate_tags(self) -> None:
        result = count_real_types([1, "a", 2, "b", 3])
        tags = [entry.tag for entry in result]
        assert len(tags) == len(set(tags))

    def test_accepts_generator(self) -> None:
        assert count_real_types(x for x in ("a", "b")) == [("string", 2)]
