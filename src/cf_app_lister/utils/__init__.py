"""Utilities - logging setup."""

import logging
import sys

import structlog


def _stderr_logger(*args) -> structlog.PrintLogger:
    # sys.stderr is looked up per logger, not at configure time
    return structlog.PrintLogger(file=sys.stderr)


def setup_logging(log_level: str = "WARNING") -> None:
    """Configure structlog to render key/value events on stderr.

    Stdout is reserved for the apps listing, so log output never mixes
    with the names a caller may be piping somewhere.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


__all__ = ["setup_logging"]
