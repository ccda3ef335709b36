# utils/logging_utils.py

"""
Logging helpers for the random-streams-options project.

Library modules only ever do:

    from utils.logging_utils import get_logger

    logger = get_logger(__name__)
    logger.debug("Resolved stream options: %s", names)

and leave handler setup to the entry point (main.py), which calls
`configure_root_logger` once.
"""

from __future__ import annotations

import logging
from logging import Logger
from typing import Optional

from config import LOG_FILENAME, LOG_LEVEL, LOGS_DIR


LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"

# Same name -> same logger instance
_LOGGER_CACHE: dict[str, Logger] = {}


def configure_root_logger(
    level: int = LOG_LEVEL,
    log_to_file: bool = False,
    log_to_stdout: bool = True,
    filename: str = LOG_FILENAME,
) -> None:
    """
    Configure the root logger for the whole project.

    Args:
        level:
            Logging level (e.g., logging.INFO, logging.DEBUG).
        log_to_file:
            If True, also write logs to LOGS_DIR / filename.
        log_to_stdout:
            If True, log to stdout.
        filename:
            Name of the log file inside LOGS_DIR.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (e.g. by pytest's caplog); only adjust level
        root.setLevel(level)
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = []

    if log_to_file:
        LOGS_DIR.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(LOGS_DIR / filename, encoding="utf-8")
        fh.setFormatter(formatter)
        handlers.append(fh)

    if log_to_stdout:
        sh = logging.StreamHandler()
        sh.setFormatter(formatter)
        handlers.append(sh)

    logging.basicConfig(level=level, handlers=handlers)


def get_logger(name: Optional[str] = None) -> Logger:
    """
    Get a (cached) logger by name.

    Unlike configure_root_logger this never touches handlers, so importing
    a library module has no logging side effects.

    Args:
        name:
            Logger name (usually __name__ in the caller). Defaults to
            "__main__".

    Returns:
        logging.Logger instance.
    """
    if name is None:
        name = "__main__"

    logger = _LOGGER_CACHE.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        _LOGGER_CACHE[name] = logger
    return logger
