"""
Logging utilities.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Library loggers stay silent unless the application configures logging
logging.getLogger("hyperscriptify").addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name or "hyperscriptify")


def configure_cli_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for command line use.

    Args:
        level: Logging level name
    """
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )
    set_log_level(level)


def set_log_level(level: str) -> None:
    """
    Set the logging level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if isinstance(numeric_level, int):
        logging.root.setLevel(numeric_level)
