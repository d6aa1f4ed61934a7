"""Logging configuration for the gotomarkdown command line.

Log records go through rich so they are printed above the live progress
display instead of through it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)


class CleanFormatter(logging.Formatter):
    """Plain INFO messages, level-prefixed everything else."""

    def format(self, record: logging.LogRecord) -> str:
        if record.levelname == "INFO":
            return record.getMessage()
        if record.levelname == "DEBUG":
            return f"debug: {record.getMessage()}"
        return f"{record.levelname}: {record.getMessage()}"


def setup_logging(verbose: bool = False, console: Console | None = None) -> RichHandler:
    """Configure the root logger for a CLI run (DEBUG when verbose).

    Pass the console used by ``ProgressReporter`` so both share one output.
    """

    level = logging.DEBUG if verbose else logging.INFO
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_level=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(CleanFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return handler


def log_conversion_summary(source: str, media: Sequence[str], copied: bool) -> None:
    """Log the media referenced by one converted file, in the given order."""

    if not media:
        logger.info("%s: no media referenced", source)
        return
    action = "copying" if copied else "not copying (--nocopy)"
    logger.info("%s: %d media reference(s), %s", source, len(media), action)
    for path in media:
        logger.debug("  media: %s", path)


__all__ = ["CleanFormatter", "log_conversion_summary", "setup_logging"]
