"""
Logging setup for Beacon.

Every module logs under the ``beacon`` hierarchy. Delivery runs on queue
worker threads, so the thread name is part of each record.
"""

import logging
import logging.handlers
import sys

LOGGER_NAME = "beacon"


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3
) -> None:
    """
    Configure the ``beacon`` logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to log to in addition to stderr
        max_bytes: Size at which the log file is rotated
        backup_count: Number of rotated files to keep
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s (%(threadName)s): %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    # requests logs every connection at DEBUG; keep it out of our output
    if log_level > logging.DEBUG:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get the logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger under the ``beacon`` hierarchy
    """
    prefix = f"{LOGGER_NAME}."
    if name.startswith(prefix):
        name = name[len(prefix):]

    return logging.getLogger(f"{prefix}{name}")
