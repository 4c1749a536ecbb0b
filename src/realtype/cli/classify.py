"""``realtype classify``: classify literal expressions from the command line.

Each argument is parsed with :func:`ast.literal_eval`.  A few names that
have no literal form are accepted as well: ``nan``, ``inf``, ``-inf``
and ``undefined``.

Rendering uses a Rich table when Rich is installed and falls back to
aligned plain text otherwise.  No classification logic lives here.
"""

from __future__ import annotations

import ast
import math
from collections.abc import Sequence
from dataclasses import dataclass

from realtype.cli import exit_codes
from realtype.cli.console import get_rich_console, rich_available
from realtype.core.aggregates import (
    all_items_have_the_same_type,
    count_real_types,
    every_item_has_a_unique_real_type,
)
from realtype.core.classifier import get_real_type
from realtype.core.markers import UNDEFINED
from realtype.core.probe import get_type
from realtype.exceptions import InvalidExpressionError

_NAMED_VALUES: dict[str, object] = {
    "nan": math.nan,
    "inf": math.inf,
    "-inf": -math.inf,
    "undefined": UNDEFINED,
}


@dataclass(frozen=True, slots=True)
class ClassifiedValue:
    """One table row: the source expression and both of its tags."""

    expression: str
    coarse: str
    real: str


# ---------------------------------------------------------------------------
# Parsing (pure)
# ---------------------------------------------------------------------------

def parse_expression(expression: str) -> object:
    """Turn one command-line argument into a Python value.

    Raises
    ------
    InvalidExpressionError
        If *expression* is neither a named value nor a Python literal.
    """
    stripped = expression.strip()
    if stripped.lower() in _NAMED_VALUES:
        return _NAMED_VALUES[stripped.lower()]
    try:
        return ast.literal_eval(stripped)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as exc:
        raise InvalidExpressionError(
            f"Not a literal expression: {expression!r}",
            hint="Use Python literals such as 1, 'a', [1, 2], {}, None, "
            "or one of: " + ", ".join(_NAMED_VALUES),
        ) from exc


def classify_values(
    expressions: Sequence[str],
    values: Sequence[object],
) -> list[ClassifiedValue]:
    """Pair every parsed value with its source expression and tags."""
    return [
        ClassifiedValue(
            expression=expression,
            coarse=get_type(value),
            real=get_real_type(value),
        )
        for expression, value in zip(expressions, values)
    ]


def classify_expressions(expressions: Sequence[str]) -> list[ClassifiedValue]:
    """Parse and classify every expression, in order."""
    values = [parse_expression(expression) for expression in expressions]
    return classify_values(expressions, values)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _summary_lines(values: Sequence[object]) -> list[str]:
    counts = ", ".join(f"{entry.tag}={entry.count}" for entry in count_real_types(values))
    return [
        f"same type: {all_items_have_the_same_type(values)}",
        f"unique types: {every_item_has_a_unique_real_type(values)}",
        f"counts: {counts}",
    ]


def _print_plain(rows: Sequence[ClassifiedValue], summary: list[str]) -> None:
    print(f"{'Expression':<24} {'Coarse':<10} {'Real':<16}")
    print("-" * 52)
    for row in rows:
        print(f"{row.expression:<24} {row.coarse:<10} {row.real:<16}")
    for line in summary:
        print(line)


def _print_rich(rows: Sequence[ClassifiedValue], summary: list[str]) -> None:
    from rich.table import Table
    from rich.text import Text

    table = Table(
        title="realtype classify",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Expression", style="bold")
    table.add_column("Coarse type")
    table.add_column("Real type", style="green")
    for row in rows:
        table.add_row(Text(row.expression), row.coarse, row.real)

    rich_console = get_rich_console()
    rich_console.print(table)
    for line in summary:
        rich_console.print(Text(line))


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_classify(expressions: Sequence[str], *, summary: bool = False) -> int:
    """Classify *expressions* and render the result table.

    Raises
    ------
    InvalidExpressionError
        If any expression cannot be parsed.  Nothing is printed then.
    """
    values = [parse_expression(expression) for expression in expressions]
    rows = classify_values(expressions, values)
    summary_lines = _summary_lines(values) if summary else []

    if rich_available():
        _print_rich(rows, summary_lines)
    else:
        _print_plain(rows, summary_lines)
    return exit_codes.SUCCESS
