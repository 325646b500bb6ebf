"""
Logging configuration for the row diff engine.

Sets up the root logger for a test run: a console handler, an optional
rotating file, and a separate level for the per-event channel that
LoggingDiffListener writes to, which is far chattier than the rest.
"""

import logging
import logging.handlers
import os
import sys
from dataclasses import dataclass

from .formatters import DATE_FORMAT, PLAIN_FORMAT, ConsoleFormatter, JSONFormatter

APP_NAME = "rowdiff"
EVENT_LOGGER = "rowdiff.events"

# Libraries whose INFO output drowns out comparison logs
NOISY_LOGGERS = ("opentelemetry", "prometheus_client", "grpc")


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class LogSettings:
    """
    Logging switches for a run

    Attributes:
        level: Root log level name
        log_file: Rotating log file path, or None for no file
        console_output: Write to stderr
        json_format: Emit one JSON object per line instead of text
        event_level: Level for the per-event channel; None leaves it at
            the root level
    """

    level: str = "INFO"
    log_file: str | None = None
    console_output: bool = True
    json_format: bool = False
    event_level: str | None = None

    @classmethod
    def from_env(cls) -> "LogSettings":
        """
        Read settings from the environment

        Environment variables:
            LOG_LEVEL: Log level (default: INFO)
            LOG_FILE: Log file path (default: none)
            LOG_JSON: Use JSON format (default: false)
            LOG_CONSOLE: Enable console output (default: true)
            LOG_EVENT_LEVEL: Level of the per-event channel (default: root level)
        """
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            console_output=_flag("LOG_CONSOLE", True),
            json_format=_flag("LOG_JSON", False),
            event_level=os.getenv("LOG_EVENT_LEVEL") or None,
        )


def _console_handler(level: int, json_format: bool, app_name: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if json_format:
        handler.setFormatter(JSONFormatter(app_name=app_name))
    else:
        handler.setFormatter(ConsoleFormatter(use_colors=True))
    return handler


def _file_handler(
    log_file: str,
    level: int,
    json_format: bool,
    app_name: str,
    max_bytes: int,
    backup_count: int,
) -> logging.Handler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    if json_format:
        handler.setFormatter(JSONFormatter(app_name=app_name))
    else:
        handler.setFormatter(logging.Formatter(fmt=PLAIN_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    console_output: bool = True,
    json_format: bool = False,
    event_level: str | None = None,
    app_name: str = APP_NAME,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure logging for a diff run

    Replaces any handlers already on the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown
            names fall back to INFO
        log_file: Path to log file (if None, file logging is disabled)
        console_output: Whether to output to stderr
        json_format: Use JSON format for both console and file logs
        event_level: Level for the per-event channel (e.g. WARNING to keep
            only mismatches while the rest of the run logs at DEBUG)
        app_name: Application name for JSON records
        max_bytes: Maximum log file size before rotation
        backup_count: Number of rotated log files to keep
    """
    numeric_level = _level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if console_output:
        root_logger.addHandler(_console_handler(numeric_level, json_format, app_name))
    if log_file:
        root_logger.addHandler(
            _file_handler(log_file, numeric_level, json_format, app_name, max_bytes, backup_count)
        )

    logging.getLogger(EVENT_LOGGER).setLevel(
        _level(event_level) if event_level else logging.NOTSET
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        f"Logging initialized: level={level}, file={log_file or 'none'}, "
        f"console={console_output}, json={json_format}, events={event_level or level}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for __name__)"""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """
    Close and detach every root handler, releasing rotated file handles.

    Example:
        import atexit
        atexit.register(shutdown_logging)
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)


def configure_from_env() -> LogSettings:
    """
    Configure logging from environment variables

    Returns:
        The settings that were applied (see LogSettings.from_env)
    """
    settings = LogSettings.from_env()
    setup_logging(
        level=settings.level,
        log_file=settings.log_file,
        console_output=settings.console_output,
        json_format=settings.json_format,
        event_level=settings.event_level,
    )
    return settings
