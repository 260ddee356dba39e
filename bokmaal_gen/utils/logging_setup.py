"""
bokmaal_gen/utils/logging_setup.py
----------------------------------

Central logging configuration for the sentence generator.

Goals:
- Provide a single place to configure log rendering and level.
- Keep stdout free for generated sentences: every log line goes to stderr.
- Modules obtain loggers through get_logger, which initializes logging on
  first use, so library callers never get structlog's stdout defaults:
      from bokmaal_gen.utils.logging_setup import get_logger
      logger = get_logger(__name__)

Usage
=====

In your CLI script:

    from bokmaal_gen.utils.logging_setup import init_logging

    if __name__ == "__main__":
        init_logging()  # ensures consistent global config

Implementation notes
====================

- We use `structlog` with event-style messages and key/value context,
  e.g. logger.warning("lexicon_unknown_word_type", tag="X", line_no=4).
- Level and renderer default to settings.LOG_LEVEL / settings.LOG_FORMAT.
- `init_logging` is idempotent; calling it multiple times is safe.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional, Union

import structlog

from bokmaal_gen.shared.config import LogFormat, settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False


def _resolve_level(level: Union[int, str, None]) -> int:
    """
    Map a level name or number to a logging level.
    Defaults to logging.WARNING if unset or invalid.
    """
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.WARNING)


def _stderr_logger_factory(*args: object) -> structlog.PrintLogger:
    # Resolve sys.stderr per call so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def init_logging(
    level: Union[int, str, None] = None,
    fmt: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Initialize structlog configuration.

    Args:
        level:
            Logging level (e.g. logging.DEBUG or "DEBUG"). If None, it is read
            from settings.LOG_LEVEL.
        fmt:
            "console" for human-readable lines, "json" for one JSON object
            per line. If None, read from settings.LOG_FORMAT.
        force:
            If True, reconfigure logging even if it was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    fmt = LogFormat(fmt or settings.LOG_FORMAT)
    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == LogFormat.JSON
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

    _INITIALIZED = True


def get_logger(name: str) -> Any:
    """
    Get a structlog logger with the given name, ensuring logging is initialized.

    If logging has not been initialized yet, this will initialize it with
    default settings (level from BOKMAAL_LOG_LEVEL, stderr output only).

    Args:
        name:
            Logger name, usually __name__ of the calling module.
    """
    if not _INITIALIZED:
        init_logging()
    return structlog.get_logger(name)


__all__ = ["init_logging", "get_logger"]
