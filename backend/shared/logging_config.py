"""
Logging configuration for the application.

``setup_logging`` attaches a console handler to the root logger once.
Modules log through ``logging.getLogger(__name__)``.
"""

import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    If the root logger already has handlers (uvicorn, pytest, a repeated
    create_app call), only the level is updated.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"). Case insensitive.
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
