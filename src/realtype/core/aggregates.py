"""Aggregate operations over collections of values.

Every function here classifies each item with
:func:`~realtype.core.classifier.get_real_type` and reduces the tags.
Nesting is not traversed: only top-level items are classified.
Inputs are read once and never mutated, so one-shot iterators are
accepted as well as sequences.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from realtype.core.classifier import get_real_types_of_items
from realtype.core.models import CountEntry


def all_items_have_the_same_type(values: Iterable[object]) -> bool:
    """Return ``True`` when no two items have different real types.

    Empty and single-item inputs are vacuously homogeneous.
    """
    return len(set(get_real_types_of_items(values))) <= 1


def every_item_has_a_unique_real_type(values: Iterable[object]) -> bool:
    """Return ``True`` when no two items share a real type.

    An empty input is vacuously unique.
    """
    tags = get_real_types_of_items(values)
    return len(set(tags)) == len(tags)


def count_real_types(values: Iterable[object]) -> list[CountEntry]:
    """Count items per real type, sorted ascending by tag.

    Tags are compared by code point, so ``"Infinity"`` and ``"NaN"``
    sort before lower-case tags.  The result does not depend on the
    input order, and the counts sum to the number of items.
    """
    counts = Counter(get_real_types_of_items(values))
    return [CountEntry(tag, count) for tag, count in sorted(counts.items())]
