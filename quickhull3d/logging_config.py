"""
Logging Configuration
Sets up the 'quickhull3d' logger for scripts and the command line.
The library itself only creates module loggers and never adds handlers.
"""
import logging
import sys
from typing import Optional, Union

from quickhull3d.config import LOG_DATETIME_FORMAT, LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'quickhull3d' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG"); defaults to QUICKHULL3D_LOG_LEVEL.
        log_file: Optional path to save logs to a file.
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger("quickhull3d")
    logger.setLevel(level)

    # repeated calls must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATETIME_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
