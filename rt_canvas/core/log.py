"""Logging setup for the rt_canvas namespace.

Library modules only create module loggers (logging.getLogger(__name__)) and
never configure handlers. The CLI calls setup_logging() once at startup.
"""

import logging
import sys

LOGGER_NAME = 'rt_canvas'


def setup_logging(level: int = logging.WARNING, log_file: str | None = None) -> logging.Logger:
    """Configure the 'rt_canvas' logger with a stderr handler and an optional file handler.

    Existing handlers are cleared first so repeated calls do not duplicate output.
    stdout is left alone because it carries the PPM data.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug('Logging initialized at level %s', logging.getLevelName(level))
    return logger
