"""
Logging setup for the anagrammer package.
"""

import logging

from anagrammer.config import Settings

LOGGER_NAME = "anagrammer"


def get_logger() -> logging.Logger:
    """
    Shared package logger.

    A stream handler is attached the first time; the level comes from
    ANAGRAMMER_LOG_LEVEL, falling back to INFO for unknown names.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        name = Settings.from_env().log_level.upper()
        level = logging.getLevelName(name)
        if isinstance(level, int):
            logger.setLevel(level)
        else:
            logger.setLevel(logging.INFO)
            logger.warning("Unknown log level %r, using INFO", name)

    return logger
