"""
Logger utility for the portals.

Both the console programs and the HTTP app call ``setup_logging`` once at
start-up. Console output goes to stdout, errors are additionally written to a
rotating ``error.log`` and, when debugging, everything goes to ``debug.log``.
"""

import os
import logging
import logging.handlers
import sys
from typing import Optional
from pathlib import Path

from portals.utils.config import get_settings

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def _resolve_level(level_name: str) -> int:
    return getattr(logging, level_name.upper(), logging.INFO)


def setup_logging(console_level: Optional[int] = None) -> logging.Logger:
    """
    Configure the root logger for a portal process.

    Args:
        console_level: Level for the stdout handler. Defaults to DEBUG when
            ``DEBUG`` is set and INFO otherwise. The console programs pass
            WARNING so log lines don't interleave with the menus.

    Returns:
        logging.Logger: The ``portals`` application logger
    """
    settings = get_settings()
    log_level = _resolve_level(settings.LOG_LEVEL)

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when reloading
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    verbose_formatter = logging.Formatter(VERBOSE_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    standard_formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    if console_level is None:
        console_level = logging.DEBUG if settings.DEBUG else logging.INFO
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(standard_formatter)
    console_handler.setLevel(console_level)
    root_logger.addHandler(console_handler)

    error_file_handler = logging.handlers.RotatingFileHandler(
        log_dir / "error.log",
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(verbose_formatter)
    root_logger.addHandler(error_file_handler)

    if settings.DEBUG or os.getenv("ENABLE_DEBUG_LOG", "False").lower() == "true":
        debug_file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "debug.log",
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT
        )
        debug_file_handler.setLevel(log_level)
        debug_file_handler.setFormatter(verbose_formatter)
        root_logger.addHandler(debug_file_handler)

    # The driver logs every heartbeat and command at DEBUG
    logging.getLogger('pymongo').setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
    logging.getLogger('httpx').setLevel(logging.WARNING)

    logger = logging.getLogger('portals')
    logger.info(f"Logging initialized with level {settings.LOG_LEVEL.upper()}")

    return logger


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with the portal format.

    If neither the logger nor the root logger has handlers yet (for example
    in a one-off script that never called ``setup_logging``), a stdout
    handler is attached so messages are not lost.

    Args:
        name: Logger name, usually ``__name__``
        level: Explicit level; defaults to ``LOG_LEVEL`` from settings

    Returns:
        logging.Logger: Configured logger instance
    """
    if level is None:
        level = _resolve_level(get_settings().LOG_LEVEL)

    logger = logging.getLogger(name or 'portals')
    logger.setLevel(level)

    root_logger = logging.getLogger()
    if not logger.handlers and not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
