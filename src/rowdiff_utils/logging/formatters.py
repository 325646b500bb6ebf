"""
Log formatters for structured and console logging.

Diff logs routinely carry cell values whose exact text matters (a trailing
space is a mismatch), so both formatters render context values without
losing that detail: JSON keeps them as data, the console quotes them when
plain text would be ambiguous.
"""

import json
import logging
import socket
import sys
import traceback
from collections.abc import Mapping
from datetime import UTC, datetime
from enum import Enum
from typing import Any

# Attributes every LogRecord carries; anything else came in through `extra`
RESERVED_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def extract_context(record: logging.LogRecord) -> dict[str, Any]:
    """
    Collect the caller-supplied context from a log record.

    Args:
        record: Log record to inspect

    Returns:
        Mapping of extra attribute names to values
    """
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in RESERVED_ATTRS and not key.startswith("_")
    }


def json_default(value: Any) -> Any:
    """json.dumps fallback for rows, statuses and raw bytes."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (bytes, bytearray)):
        return value.hex()
    return str(value)


def render_value(value: Any) -> str:
    """Text form of a context value for console output."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str) and (not value or value != value.strip() or "," in value):
        return repr(value)
    return str(value)


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    One object per record with level, logger, message and source, plus
    "exception" and "context" when present.
    """

    def __init__(
        self,
        include_timestamp: bool = True,
        include_hostname: bool = True,
        app_name: str = "rowdiff",
    ):
        """
        Args:
            include_timestamp: Include ISO8601 UTC timestamp
            include_hostname: Include hostname in log records
            app_name: Application name to include in logs
        """
        super().__init__()
        self.include_timestamp = include_timestamp
        self.include_hostname = include_hostname
        self.app_name = app_name
        self.hostname = socket.gethostname() if include_hostname else None

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "app": self.app_name,
        }
        if self.include_timestamp:
            log_data["timestamp"] = datetime.fromtimestamp(record.created, UTC).isoformat()
        if self.hostname:
            log_data["hostname"] = self.hostname
        log_data["source"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName,
        }

        exception = self._exception(record)
        if exception:
            log_data["exception"] = exception

        context = extract_context(record)
        if context:
            log_data["context"] = context

        return json.dumps(log_data, default=json_default)

    @staticmethod
    def _exception(record: logging.LogRecord) -> dict[str, Any] | None:
        if not record.exc_info or record.exc_info[0] is None:
            return None
        exc_type, exc_value, exc_tb = record.exc_info
        return {
            "type": exc_type.__name__,
            "message": str(exc_value),
            "traceback": traceback.format_exception(exc_type, exc_value, exc_tb),
        }


class ConsoleFormatter(logging.Formatter):
    """
    Human-readable single-line formatter with optional colors
    """

    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True):
        """
        Args:
            use_colors: Whether to use ANSI color codes (only honoured on a TTY)
        """
        super().__init__(fmt=PLAIN_FORMAT, datefmt=DATE_FORMAT)
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if self.use_colors and levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            formatted = super().format(record)
        finally:
            # Other handlers share the record
            record.levelname = levelname

        context = extract_context(record)
        if context:
            pairs = ", ".join(f"{key}={render_value(value)}" for key, value in context.items())
            formatted += f" [{pairs}]"

        return formatted
