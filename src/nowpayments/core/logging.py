"""
Logging setup for the NOWPayments SDK.

All SDK loggers live under the ``nowpayments`` namespace. Applications either
call configure_logging() or attach their own handlers to that logger.
"""

import json
import logging
import sys
from typing import Any, TextIO

LOGGER_NAME = "nowpayments"

TEXT_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Render each record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def configure_logging(
    level: int | str = logging.INFO,
    json_format: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure the SDK logger with a single stream handler.

    Calling it again replaces the handler instead of adding a second one.

    Args:
        level: Logging level (e.g., logging.INFO, "DEBUG")
        json_format: Emit one JSON object per line instead of text
        stream: Output stream for the handler (defaults to stdout)

    Returns:
        The configured ``nowpayments`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(json_format))
    logger.addHandler(handler)

    # SDK records stay off the root logger
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a child logger of nowpayments."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


def mask_secret(value: str | bytes | None, visible: int = 4) -> str:
    """Return a value with most characters masked, for safe logging."""
    if not value:
        return "<unset>"
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if len(value) <= visible * 2:
        return "****"
    return value[:visible] + "..." + value[-visible:]
