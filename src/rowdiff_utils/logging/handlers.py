"""
Logger adapters that carry context.

ContextLogger attaches a fixed set of key-value pairs (for example the
fixture or table under test) to every record it emits, so a run over many
fixtures can be filtered by field instead of by message text.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

# Keyword arguments that Logger.log understands itself
LOG_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})


class ContextLogger(logging.LoggerAdapter):
    """
    Logger adapter that adds contextual information to all log messages

    Keyword arguments other than the ones Logger.log accepts become record
    attributes, on top of the bound context.

    Usage:
        logger = ContextLogger("rowdiff.report", fixture="orders")
        logger.warning("Row mismatch", row_status="WRONG")
        # Record carries both fixture and row_status
    """

    def __init__(self, name: str, **context: Any):
        super().__init__(logging.getLogger(name), dict(context))

    @property
    def context(self) -> dict[str, Any]:
        return self.extra

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        passthrough = {k: v for k, v in kwargs.items() if k in LOG_KWARGS}
        fields = {k: v for k, v in kwargs.items() if k not in LOG_KWARGS}
        passthrough["extra"] = {**self.extra, **passthrough.get("extra", {}), **fields}
        return msg, passthrough

    def bind(self, **context: Any) -> "ContextLogger":
        """
        Return a new logger with additional context

        The receiver is left unchanged.
        """
        return ContextLogger(self.logger.name, **{**self.extra, **context})

    def update_context(self, **context: Any) -> None:
        self.extra.update(context)

    def get_context(self) -> dict[str, Any]:
        return dict(self.extra)
