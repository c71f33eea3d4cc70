"""
Logging configuration for the Wang tile engine and editor algorithms.

Usage:
    from wang.logging_config import setup_logging
    setup_logging(log_dir)  # Call once at startup

Loggers under wang.* and editor.* write DEBUG to file, WARNING+ to console.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


LOG_FILE_NAME = "wang.log"
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB per file
BACKUP_COUNT = 3
LOGGER_NAMES = ("wang", "editor")


def setup_logging(
    log_dir: Path | str,
    log_level: int = logging.DEBUG,
    console_level: int = logging.WARNING,
) -> Path:
    """
    Configure file and console logging.

    Calling again replaces the handlers installed by the previous call.

    Args:
        log_dir: Directory for the log file (created if missing)
        log_level: Level for file logging (default: DEBUG)
        console_level: Level for console output (default: WARNING)

    Returns:
        Path to the log file
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_path = log_path / LOG_FILE_NAME

    file_formatter = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-30s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter(fmt="%(levelname)-8s | %(name)-25s | %(message)s")

    # One handler pair shared by all loggers so rotation sees a single writer
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(file_formatter)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_formatter)

    closed = set()
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            if id(handler) not in closed:
                handler.close()
                closed.add(id(handler))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    logging.getLogger("wang").info(f"Logging to {log_path.absolute()}")
    return log_path
