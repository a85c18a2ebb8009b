"""Logging utilities for helm-images."""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "helm_images"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class PlainFormatter(logging.Formatter):
    """Formatter that prefixes each message with its level."""

    PREFIXES = {
        logging.DEBUG: "[DEBUG]",
        logging.INFO: "[INFO]",
        logging.WARNING: "[WARN]",
        logging.ERROR: "[ERROR]",
        logging.CRITICAL: "[CRITICAL]",
    }

    def format(self, record: logging.LogRecord) -> str:
        prefix = self.PREFIXES.get(record.levelno, "[LOG]")
        return f"{prefix} {record.getMessage()}"


def setup_logging(level: str = "warning", stream: Optional[TextIO] = None) -> None:
    """
    Configure the package logger.

    Args:
        level: One of debug, info, warning, error
        stream: Where to write log lines, stderr by default so that
            stdout stays clean for the extracted images
    """
    if level.lower() not in LEVELS:
        raise ValueError(f"unknown log level '{level}', expected one of {', '.join(LEVELS)}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(LEVELS[level.lower()])

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(PlainFormatter())
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Args:
        name: Module name, usually __name__

    Returns:
        Logger instance
    """
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
