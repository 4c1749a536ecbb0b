"""Logging setup for realtype.

Harness and CLI events (``cli.dispatch``, ``case.finished``,
``case.errored``, ``suite.finished``) go through structlog and are
rendered on stderr, so they never mix with the check report or the
classify table on stdout.

- Console (default): one human-readable line per event
- JSON (``--log-json``): one JSON object per line, keys sorted

Context bound with :func:`structlog.contextvars.bound_contextvars`
(the CLI binds the running ``command``) is merged into every event.
"""

from __future__ import annotations

import logging
import sys
from typing import Final

import structlog
from structlog.types import Processor

PACKAGE_LOGGER: Final = "realtype"


def _shared_processors() -> list[Processor]:
    # Also applied to records from plain ``logging`` callers.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(log_json: bool) -> logging.Handler:
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route realtype events to stderr.

    Safe to call repeatedly: the root handler is replaced, not stacked.

    Args:
        verbose: Show per-case and suite events (DEBUG).  Otherwise
            only warnings, such as a fixture case that raised.
        log_json: Render JSON lines instead of console lines.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(_stderr_handler(log_json))
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )
