"""Logging configuration for the ``tally`` package.

Library modules call ``get_logger(__name__)`` and never attach handlers. The
CLI calls ``configure_logging`` once at startup, which routes the package
logger through a rich handler on stderr.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

_PKG_LOGGER_NAME = "tally"
_LEVEL_ENV_VAR = "TALLY_LOG_LEVEL"
_configured = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        level = os.environ.get(_LEVEL_ENV_VAR, "WARNING")
    level = level.strip().upper()
    if level.isdigit():
        return int(level)
    numeric = logging.getLevelName(level)
    return numeric if isinstance(numeric, int) else logging.WARNING


def configure_logging(level: int | str | None = None) -> None:
    """Attach a single rich handler to the package logger.

    Args:
        level: Level as int or name. If None, uses TALLY_LOG_LEVEL or WARNING.
    """
    global _configured

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    numeric_level = _parse_level(level)
    logger.setLevel(numeric_level)

    if _configured:
        return

    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger, keeping the package silent until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _configured and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
