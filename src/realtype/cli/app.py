"""CLI application entry point and command routing for realtype.

This module is the **sole error boundary** for the entire application.
It catches :class:`~realtype.exceptions.RealTypeError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No classification logic lives here: all work is delegated to the
  core and harness layers.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

import structlog

from realtype.cli import exit_codes
from realtype.cli.console import console
from realtype.exceptions import RealTypeError
from realtype.utils.logging import configure_logging
from realtype.version import __version__

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Runtime options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RunOptions:
    """Runtime configuration gathered from argv before dispatch."""

    verbose: bool = False
    log_json: bool = False
    blocks: tuple[str, ...] = ()
    """Fixture blocks selected for ``check``; empty means all."""

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> RunOptions:
        return cls(
            verbose=args.verbose,
            log_json=args.log_json,
            blocks=tuple(getattr(args, "blocks", ())),
        )


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``realtype check``: run the literal fixture suite
    * ``realtype classify EXPR...``: classify literal expressions
    * ``realtype --version``
    """
    parser = argparse.ArgumentParser(
        prog="realtype",
        description="Fine-grained runtime type classification.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Emit debug logs on stderr.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON lines instead of console text.",
    )

    commands = parser.add_subparsers(dest="command")

    check = commands.add_parser("check", help="Run the built-in fixture suite.")
    check.add_argument(
        "-b",
        "--block",
        dest="blocks",
        action="append",
        default=[],
        metavar="NAME",
        help="Only run the named block (repeatable).",
    )

    classify = commands.add_parser(
        "classify",
        help="Print the coarse and real type of literal expressions.",
    )
    classify.add_argument(
        "expressions",
        nargs="+",
        metavar="EXPR",
        help="A Python literal, or nan / inf / -inf / undefined "
        "(put -- before arguments that start with a dash).",
    )
    classify.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Also print same-type, unique-type and grouped counts.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_check(options: RunOptions) -> int:
    """Run the fixture suite through the best available reporter."""
    from realtype.cli.report import make_reporter
    from realtype.harness.fixtures import build_suite
    from realtype.harness.runner import HarnessRunner, select_blocks

    blocks = select_blocks(build_suite(), options.blocks)
    runner = HarnessRunner(make_reporter())
    report = runner.run(blocks)
    return exit_codes.SUCCESS if report else exit_codes.GENERAL_ERROR


def _handle_classify(expressions: list[str], *, summary: bool) -> int:
    from realtype.cli.classify import run_classify

    return run_classify(expressions, summary=summary)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the realtype CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    options = RunOptions.from_args(args)
    configure_logging(verbose=options.verbose, log_json=options.log_json)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    with structlog.contextvars.bound_contextvars(command=args.command):
        logger.debug("cli.dispatch")
        if args.command == "check":
            return _handle_check(options)
        return _handle_classify(args.expressions, summary=args.summary)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a
    raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RealTypeError as exc:
        console.print(f"Error: {exc}", markup=False)
        if exc.hint:
            console.print(f"Hint: {exc.hint}", markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            f"Unexpected error. Please report this issue.\n  {type(exc).__name__}: {exc}",
            markup=False,
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
