"""
Logging configuration.

Module loggers are created with ``logging.getLogger(__name__)``; this only
sets the root handler and level once at startup.
"""

import logging

from core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logger(level: str = LOG_LEVEL) -> None:
    """Configures the application logger."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
