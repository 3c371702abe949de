# mzqclib/utils/logging_config.py
import logging
import logging.handlers
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "mzqclib"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    log_level: Union[int, str] = logging.INFO, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the mzqclib package logger.

    Args:
        log_level: Minimum level to emit, as a logging constant or its name
            (e.g. "DEBUG").
        log_file: Optional path of a rotating log file. If None, logs only go
            to stdout.

    Returns:
        The configured "mzqclib" logger.
    """
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper())

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)

    # Drop handlers from a previous call
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging configured at level {logging.getLevelName(log_level)}")
    return logger
