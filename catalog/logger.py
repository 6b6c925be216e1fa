"""
Centralized logging.

Every module obtains its logger through get_logger(__name__) so the output
format is identical everywhere and goes to stdout (container friendly).
"""

import logging
import os
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Configure and return a logger with the standard formatting.

    Args:
        name (str): Name of the calling module (usually __name__).

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    # Avoid stacking handlers when the same module asks twice
    if not logger.handlers:
        level = os.environ.get("LOG_LEVEL", "INFO").upper()
        logger.setLevel(getattr(logging, level, logging.INFO))

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

        logger.addHandler(handler)

    return logger
