"""
Logging helpers for micro_vdom.

The package logs under the ``micro_vdom`` logger and its children. Nothing
is printed until an application calls ``setup_logging``.
"""

import copy
import logging
import os
import sys
import time
from typing import Dict, Optional

ROOT_LOGGER_NAME = "micro_vdom"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"

_RESET = '\033[0m'

# ANSI sequence per level number
_LEVEL_COLORS = {
    logging.DEBUG: '\033[34m',
    logging.INFO: '\033[32m',
    logging.WARNING: '\033[33m',
    logging.ERROR: '\033[31m',
    logging.CRITICAL: '\033[1;31m',
}


def _level(name: str, fallback: int) -> int:
    """Map a level name such as "debug" or "INFO" to its number."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else fallback


class LogFormatter(logging.Formatter):
    """Console formatter that paints the level name of each record."""

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Args:
            colored: Paint level names with ANSI colors (never on Windows)
        """
        super().__init__(*args, **kwargs)
        self.colored = colored and sys.platform != 'win32'

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelno)
        if not self.colored or color is None:
            return super().format(record)

        # Other handlers share the record, so paint a copy
        painted = copy.copy(record)
        painted.levelname = f"{color}{record.levelname}{_RESET}"
        return super().format(painted)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(LogFormatter(colored=True, fmt=CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    return handler


def _file_handler(log_file: str, level: int) -> logging.Handler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "INFO",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optionally file) output to the package logger.

    Calling it again for the same logger returns it unchanged.

    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Console logging level name
        file_level: File logging level name
        component: Sub-logger to configure instead of the whole package
            (e.g. "dom")

    Returns:
        logging.Logger: The configured logger
    """
    name = f"{ROOT_LOGGER_NAME}.{component}" if component else ROOT_LOGGER_NAME
    logger = logging.getLogger(name)

    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    handlers = [_console_handler(_level(console_level, logging.INFO))]
    if log_file:
        handlers.append(_file_handler(log_file, _level(file_level, logging.DEBUG)))

    # The logger lets through whatever its most verbose handler wants
    logger.setLevel(min(h.level for h in handlers))
    for handler in handlers:
        logger.addHandler(handler)

    return logger


def log_exception(logger: logging.Logger, exception: BaseException,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception at ERROR level together with its traceback.

    Usable outside an ``except`` block, since the traceback is taken from the
    exception itself.
    """
    exc_info = (type(exception), exception, exception.__traceback__)
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class PerformanceLogger:
    """Times named operations and logs their duration."""

    def __init__(self, logger: logging.Logger, component: str):
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        Stop timing ``name`` and log how long it took.

        Returns:
            float: Duration in seconds, 0.0 if ``name`` was never started
        """
        started = self.start_times.pop(name, None)
        if started is None:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        duration = time.perf_counter() - started
        self.logger.log(_level(level, logging.DEBUG),
                        f"{self.component} {name} took {duration:.4f} seconds")
        return duration
