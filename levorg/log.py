"""Logging setup.

The editor owns the whole screen, so log records go to a file and never to
the terminal.
"""

import logging
import os

from .config import EditorConfig
from .constants import EditorConstants

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: EditorConfig) -> logging.Handler:
    """Attach a file handler to the package logger.

    The LEVORG_LOG_LEVEL environment variable overrides the configured level.
    If the log file cannot be opened, records are dropped instead.

    Returns:
        The handler that was installed
    """
    level_name = os.environ.get(EditorConstants.LOG_LEVEL_ENV_VAR) or config.log_level
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.getLevelName(EditorConstants.DEFAULT_LOG_LEVEL)

    handler: logging.Handler
    try:
        log_path = config.log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding='utf-8')
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger(EditorConstants.APP_NAME)
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    # Keep records away from the root logger's stderr handler
    package_logger.propagate = False
    return handler
