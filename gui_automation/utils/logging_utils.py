"""Central logging configuration using Loguru sinks."""

from __future__ import annotations

import logging
import sys

from loguru import logger as loguru_logger

LOGGER_PREFIX = "demoqa"

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)


def get_logger(name: str) -> logging.Logger:
    """Create a namespaced logger for a suite component."""
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to Loguru, keeping the original logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        loguru_logger.bind(logger_name=record.name).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(level: str = "INFO", log_file: str | None = None, serialize: bool = False) -> None:
    """Route stdlib logging through a Loguru stderr sink and an optional file sink."""
    level = level.upper()
    loguru_logger.remove()
    loguru_logger.configure(extra={"logger_name": LOGGER_PREFIX})
    loguru_logger.add(
        sys.stderr,
        level=level,
        format=_CONSOLE_FORMAT,
        serialize=serialize,
        enqueue=False,
        backtrace=False,
        diagnose=False,
    )
    if log_file:
        loguru_logger.add(
            log_file,
            level=level,
            rotation="10 MB",
            retention=5,
            serialize=serialize,
            enqueue=False,
        )

    logging.basicConfig(
        handlers=[InterceptHandler()],
        level=getattr(logging, level, logging.INFO),
        force=True,
    )
