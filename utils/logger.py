"""Logging setup for the keep-awake application."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, Union


LOGGER_NAME = "JustMoveIt"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str = LOGGER_NAME,
    log_file: Optional[str] = "logs/justmoveit.log",
    level: Union[int, str] = logging.INFO,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
    console: bool = True,
) -> logging.Logger:
    """
    Create and configure the application logger.

    Calling it again for the same name replaces the previous handlers, so the
    logger is always configured exactly once per call site.

    Args:
        name: Logger name
        log_file: Rotating log file path, or None for no file output
        level: Logging level (name or number)
        max_bytes: Size at which the log file rotates
        backup_count: Number of rotated files to keep
        console: Also log to stderr

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    teardown_logger(logger)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    logger.propagate = False

    # Formatter
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file:
        # Create logs directory if it doesn't exist
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        # File handler with rotation
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def teardown_logger(logger: logging.Logger):
    """Close and detach all handlers of a logger."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
