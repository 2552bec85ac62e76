"""structlog configuration for howoldami.

stdout only ever carries the result, so every log line goes to stderr.
The ``--verbose``/``--quiet`` level decides how much of it is shown:

- QUIET: errors only
- NORMAL: warnings and errors
- VERBOSE: everything from ``howoldami.*`` down to DEBUG (layer
  application, config-file diagnostics, the computed age)

``--log-json`` swaps the console renderer for JSON lines.
"""

from __future__ import annotations

import logging
import sys

import structlog

from howoldami.domain.types import Verbosity

APP_LOGGER = "howoldami"

LEVELS: dict[Verbosity, int] = {
    Verbosity.QUIET: logging.ERROR,
    Verbosity.NORMAL: logging.WARNING,
    Verbosity.VERBOSE: logging.DEBUG,
}


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    verbosity: Verbosity = Verbosity.NORMAL,
    *,
    log_json: bool = False,
) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Safe to call repeatedly; the root handler is replaced, not stacked.

    Args:
        verbosity: Output level; mapped to a logging level via :data:`LEVELS`.
        log_json: Use JSON renderer instead of console renderer.
    """
    app_level = LEVELS[verbosity]

    # Records from logging.getLogger(__name__) take the same path as structlog's.
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    # Third-party libraries never go below WARNING, and follow --quiet up.
    root_logger.setLevel(max(app_level, logging.WARNING))

    logging.getLogger(APP_LOGGER).setLevel(app_level)
