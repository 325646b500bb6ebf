"""
Structured logging configuration for the row diff engine

Provides JSON-formatted or human-readable logging with contextual
information attached to each record.

Usage:
    from rowdiff_utils.logging import setup_logging, get_logger

    # Setup logging (call once at application startup)
    setup_logging(level="INFO", log_file="/var/log/rowdiff/app.log")

    # Get logger for your module
    logger = get_logger(__name__)

    # Log with context
    logger.info("Row compared", extra={
        "fixture": "orders_by_customer",
        "row_status": "WRONG",
    })
"""

from .config import (
    LogSettings,
    configure_from_env,
    get_logger,
    setup_logging,
    shutdown_logging,
)
from .formatters import ConsoleFormatter, JSONFormatter
from .handlers import ContextLogger

__all__ = [
    "setup_logging",
    "get_logger",
    "configure_from_env",
    "LogSettings",
    "shutdown_logging",
    "JSONFormatter",
    "ConsoleFormatter",
    "ContextLogger",
]
