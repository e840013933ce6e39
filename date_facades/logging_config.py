"""Logging configuration for date-facades"""
import copy
import logging
import sys
from typing import Optional, TextIO

from date_facades.config import Config
from date_facades.constants import DEBUG_LOG_FORMAT, LOG_DATE_FORMAT, LOG_FORMAT

LEVEL_COLORS = {
    logging.DEBUG: '\033[36m',
    logging.INFO: '\033[32m',
    logging.WARNING: '\033[33m',
    logging.ERROR: '\033[31m',
    logging.CRITICAL: '\033[35m',
}
RESET = '\033[0m'


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_color: bool = False):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if not self.use_color or color is None:
            return super().format(record)
        # Other handlers share the record, so color a copy
        colored = copy.copy(record)
        colored.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(colored)


def _level_for(config: Config) -> int:
    if config.debug:
        return logging.DEBUG
    if config.verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(config: Config, stream: Optional[TextIO] = None) -> None:
    """
    Configure the root logger from the command-line settings.

    Args:
        config: Configuration; verbose shows INFO, debug shows DEBUG with timestamps
        stream: Destination for log output, stderr when omitted
    """
    stream = stream if stream is not None else sys.stderr
    level = _level_for(config)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    isatty = getattr(stream, "isatty", None)
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(
        fmt=DEBUG_LOG_FORMAT if config.debug else LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT if config.debug else None,
        use_color=bool(isatty and isatty()),
    ))
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance
    """
    # Strip the package prefix for cleaner log names
    if name.startswith('date_facades.'):
        name = name.replace('date_facades.', '', 1)
    if name.startswith('services.'):
        name = name.replace('services.', '', 1)

    return logging.getLogger(name)
