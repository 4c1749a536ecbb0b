"""realtype: fine-grained runtime type classification.

Refines Python's shallow type query into disjoint "real type" tags and
aggregates them over collections of values.
"""

from realtype.core import (
    UNDEFINED,
    BoxedBoolean,
    BoxedNumber,
    BoxedString,
    CountEntry,
    Symbol,
    all_items_have_the_same_type,
    count_real_types,
    every_item_has_a_unique_real_type,
    get_real_type,
    get_real_types_of_items,
    get_type,
    get_types_of_items,
)
from realtype.version import __version__

__all__: list[str] = [
    "UNDEFINED",
    "BoxedBoolean",
    "BoxedNumber",
    "BoxedString",
    "CountEntry",
    "Symbol",
    "__version__",
    "all_items_have_the_same_type",
    "count_real_types",
    "every_item_has_a_unique_real_type",
    "get_real_type",
    "get_real_types_of_items",
    "get_type",
    "get_types_of_items",
]
