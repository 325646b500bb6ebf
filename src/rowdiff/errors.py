"""
Exception hierarchy for the row diff engine.

Configuration problems are raised eagerly when a DataRowDiff is built.
Absent rows and absent columns are not errors; they are reported as
MISSING/SURPLUS statuses.
"""

from typing import Any


class RowDiffError(ValueError):
    """Base class for row diff errors."""


class ColumnConfigurationError(RowDiffError):
    """Raised when the column list given to DataRowDiff is unusable."""


class ListenerError(RowDiffError):
    """
    Raised after a diff completes when one or more listeners failed.

    Every listener still received the full event sequence; this error
    reports the failures collected along the way.

    Attributes:
        failures: List of (listener, result, exception) tuples in the order
            they occurred
    """

    def __init__(self, failures: list[tuple[Any, Any, Exception]]):
        self.failures = failures
        names = sorted({type(listener).__name__ for listener, _, _ in failures})
        super().__init__(
            f"{len(failures)} listener notification(s) failed: {', '.join(names)}"
        )
