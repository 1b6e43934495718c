"""Logging configuration using loguru.

The CLI writes its results (snapshots, device lists, bounds) to stdout, so
logs always go to stderr.  ``json_logs`` switches the stderr sink to loguru's
serialized records for tools that parse the log stream.  Records emitted
through stdlib ``logging`` are forwarded into loguru at the same threshold.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
)

# stdlib levels without a loguru counterpart (e.g. custom ones) are passed as numbers.
_LOGURU_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"})


class _InterceptHandler(logging.Handler):
    """Re-emit stdlib records through loguru, attributed to the stdlib caller."""

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int = record.levelname if record.levelname in _LOGURU_LEVELS else record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO", *, json_logs: bool = False) -> None:
    """Replace all loguru sinks with one stderr sink at *level*.

    Safe to call more than once.
    """
    level = level.upper()

    logger.remove()
    if json_logs:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    stdlib_level = logging.getLevelNamesMapping().get(level, logging.NOTSET)
    logging.basicConfig(handlers=[_InterceptHandler()], level=stdlib_level, force=True)
