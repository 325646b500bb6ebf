"""
Listener that writes diff events to the log.

Successful comparisons are logged at DEBUG, everything else at WARNING,
each with the event's details attached as structured context.
"""

from rowdiff_utils.logging import ContextLogger

from ..result import MatchResult
from .base import DiffListener


class LoggingDiffListener(DiffListener):
    """
    Logs every event with structured context.

    Args:
        logger_name: Name of the underlying logger
        **context: Extra context attached to each record (e.g. fixture="orders")
    """

    def __init__(self, logger_name: str = "rowdiff.events", **context):
        self.logger = ContextLogger(logger_name, **context)

    def on_event(self, result: MatchResult) -> None:
        fields = {
            "entity": result.entity_type.value,
            "status": result.status.value,
        }
        if result.is_cell:
            fields.update(column=result.name, expected=result.expected, actual=result.actual)

        if result.is_success:
            self.logger.debug(f"{result.entity_type.value} matched", **fields)
        elif result.is_cell:
            self.logger.warning(
                f"cell {result.name!r} {result.status.value}: "
                f"expected={result.expected!r} actual={result.actual!r}",
                **fields,
            )
        else:
            self.logger.warning(f"row {result.status.value}", **fields)
