"""Runtime logging helpers."""

from __future__ import annotations

import os
import sys
from logging import Handler

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

_PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def _build_rich_handler() -> Handler:
    return RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure process-level logging once per level."""

    global _CONFIGURED_LEVEL
    level = (level or os.getenv("CCOPY_LOG_LEVEL", "WARNING")).upper()
    if level == _CONFIGURED_LEVEL:
        return

    logger.remove()
    if sys.stderr.isatty():
        logger.add(
            _build_rich_handler(),
            level=level,
            format="{message}",
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stderr,
            level=level,
            format=_PLAIN_FORMAT,
            backtrace=False,
            diagnose=False,
        )
    _CONFIGURED_LEVEL = level
