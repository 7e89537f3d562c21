"""Package logging for graphlp.

All module loggers hang below the ``graphlp`` logger, which owns the only
handler. Its initial level comes from the ``GRAPHLP_LOG_LEVEL`` environment
variable (a level name such as ``DEBUG``), defaulting to INFO.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "graphlp"
LOG_LEVEL_ENV = "GRAPHLP_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _level_from_env(default: int = logging.INFO) -> int:
    value = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not value:
        return default
    level = logging.getLevelName(value)
    if not isinstance(level, int):
        raise ValueError(
            f"Invalid {LOG_LEVEL_ENV}={value!r}; expected a level name such as "
            "DEBUG, INFO or WARNING."
        )
    return level


def setup_root_logger(
    level: Optional[int] = None,
    format_string: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Configure the ``graphlp`` logger once and return it.

    Later calls return the logger unchanged until `reset_logging()`.

    Args:
        level: Logging level. Defaults to ``GRAPHLP_LOG_LEVEL`` or INFO.
        format_string: Format of the package handler.
        handler: Handler to install instead of a stdout stream handler.
    """
    global _configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return root_logger

    root_logger.setLevel(_level_from_env() if level is None else level)
    root_logger.handlers.clear()
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)
    # Records still reach the root logger, where pytest's caplog listens.
    root_logger.propagate = True

    _configured = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name``; its level defers to ``graphlp``."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``graphlp`` logger and its handlers."""
    root_logger = setup_root_logger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Log variable creation and naming during formulation builds."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler so the next setup starts from scratch."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
