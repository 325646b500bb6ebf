"""
Row comparison engine for database acceptance tests

Compares an expected row with an actual row over a chosen list of columns
and reports every cell outcome, then the row outcome, to registered
listeners.

Components:
- status: MatchStatus (SUCCESS, WRONG, MISSING, SURPLUS)
- model: DataRow and DataCell value containers
- result: MatchResult event payloads
- listeners: DiffListener/DiffHandler contracts, adapter and built-in observers
- diff: DataRowDiff orchestrator

Usage:
    from rowdiff import DataRow, DataRowDiff, DiffSummarizer

    differ = DataRowDiff(["id", "name"])
    summary = DiffSummarizer()
    differ.add_handler(summary)
    differ.diff(DataRow({"id": 1, "name": "a"}), DataRow({"id": 1, "name": "b"}))
"""

from .config import DiffSettings
from .diff import DataRowDiff, combine_row_status, compare_cell
from .errors import ColumnConfigurationError, ListenerError, RowDiffError
from .listeners import (
    DiffHandler,
    DiffListener,
    DiffListenerAdapter,
    DiffSummarizer,
    LoggingDiffListener,
    MetricsDiffHandler,
    RecordingDiffListener,
)
from .model import DataCell, DataRow, normalise_value, values_equal
from .result import EntityType, MatchResult
from .status import MatchStatus

__version__ = "1.0.0"
__all__ = [
    "DataRowDiff",
    "compare_cell",
    "combine_row_status",
    "DiffSettings",
    "DataRow",
    "DataCell",
    "normalise_value",
    "values_equal",
    "EntityType",
    "MatchResult",
    "MatchStatus",
    "DiffListener",
    "DiffHandler",
    "DiffListenerAdapter",
    "RecordingDiffListener",
    "DiffSummarizer",
    "LoggingDiffListener",
    "MetricsDiffHandler",
    "RowDiffError",
    "ColumnConfigurationError",
    "ListenerError",
]
