"""Core layer: pure value classification and aggregation.

Rules
-----
* No ``print()`` calls and no logging.
* No filesystem or network I/O.
* No imports from ``cli`` or ``harness``.
* Every function is total: it returns a result for any input and
  never raises.
"""

from realtype.core.aggregates import (
    all_items_have_the_same_type,
    count_real_types,
    every_item_has_a_unique_real_type,
)
from realtype.core.classifier import (
    RULES,
    get_real_type,
    get_real_types_of_items,
    type_descriptor,
)
from realtype.core.markers import (
    UNDEFINED,
    BoxedBoolean,
    BoxedNumber,
    BoxedString,
    Symbol,
)
from realtype.core.models import ClassificationRule, CountEntry
from realtype.core.probe import COARSE_TAGS, get_type, get_types_of_items

__all__: list[str] = [
    "COARSE_TAGS",
    "RULES",
    "UNDEFINED",
    "BoxedBoolean",
    "BoxedNumber",
    "BoxedString",
    "ClassificationRule",
    "CountEntry",
    "Symbol",
    "all_items_have_the_same_type",
    "count_real_types",
    "every_item_has_a_unique_real_type",
    "get_real_type",
    "get_real_types_of_items",
    "get_type",
    "get_types_of_items",
    "type_descriptor",
]
