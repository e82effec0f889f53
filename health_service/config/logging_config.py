"""Structlog setup for the health service."""

import logging
import sys

import structlog


def resolve_log_level(log_level: str, debug_mode: bool = False) -> int:
    """Map a level name such as ``"warning"`` to its numeric value.

    Debug mode always wins over the configured name.
    """
    if debug_mode:
        return logging.DEBUG
    return logging.getLevelName(log_level.upper())


def configure_logging(log_level: str = "INFO", debug_mode: bool = False):
    """Route stdlib logging and structlog to stdout at the configured level.

    Args:
        log_level: Level name from ``Settings.log_level``
        debug_mode: Force DEBUG regardless of ``log_level``
    """
    level = resolve_log_level(log_level, debug_mode)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    # httpx is only pulled in by the test client
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
