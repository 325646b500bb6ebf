"""
Row diff engine.

DataRowDiff compares an expected row with an actual row over a fixed list
of columns and reports the outcome as a stream of MatchResult events: one
per column, then one for the row as a whole.
"""

import logging
import time
from collections.abc import Iterable
from typing import Any

from rowdiff_utils.metrics import DiffMetrics, get_diff_metrics
from rowdiff_utils.tracing import add_span_attributes, add_span_event, trace_operation

from .config import DiffSettings
from .errors import ColumnConfigurationError, ListenerError, RowDiffError
from .listeners.base import DiffHandler, DiffListener, DiffListenerAdapter, as_listener
from .model import DataRow, normalise_name, values_equal
from .result import MatchResult
from .status import MatchStatus

logger = logging.getLogger(__name__)


def compare_cell(
    expected_row: DataRow | None,
    actual_row: DataRow | None,
    column: str,
) -> MatchStatus:
    """
    Classify a single column of a row pair.

    Whole-row absence overrides the per-column lookup: every column of a
    missing actual row is MISSING, every column of an unexpected row is
    SURPLUS.

    Args:
        expected_row: Expected row, or None if no row was expected
        actual_row: Actual row, or None if no row was found
        column: Column name to compare

    Returns:
        Status of the cell
    """
    if actual_row is None:
        return MatchStatus.MISSING
    if expected_row is None:
        return MatchStatus.SURPLUS

    in_expected = expected_row.has(column)
    in_actual = actual_row.has(column)

    if in_expected and not in_actual:
        return MatchStatus.MISSING
    if in_actual and not in_expected:
        return MatchStatus.SURPLUS
    if not in_expected and not in_actual:
        # Both sides model "no value" the same way
        return MatchStatus.SUCCESS

    if values_equal(expected_row[column], actual_row[column]):
        return MatchStatus.SUCCESS
    return MatchStatus.WRONG


def combine_row_status(
    expected_row: DataRow | None,
    actual_row: DataRow | None,
    cell_statuses: Iterable[MatchStatus],
) -> MatchStatus:
    """
    Combine cell outcomes into the row outcome.

    Row absence is decided once for the whole row and dominates; for a
    pair of present rows any non-successful cell makes the row WRONG.
    """
    if actual_row is None:
        return MatchStatus.MISSING
    if expected_row is None:
        return MatchStatus.SURPLUS
    if all(status.is_success for status in cell_statuses):
        return MatchStatus.SUCCESS
    return MatchStatus.WRONG


def _validate_columns(columns: Iterable[str], case_sensitive: bool) -> tuple[str, ...]:
    if isinstance(columns, str):
        raise ColumnConfigurationError(
            "Columns must be a sequence of names, not a single string"
        )

    names = tuple(columns)
    if not names:
        raise ColumnConfigurationError("At least one column is required")

    seen: dict[str, str] = {}
    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise ColumnConfigurationError(f"Invalid column name: {name!r}")
        key = normalise_name(name, case_sensitive)
        if key in seen:
            raise ColumnConfigurationError(
                f"Duplicate column name: {name!r} (already listed as {seen[key]!r})"
            )
        seen[key] = name

    return names


class DataRowDiff:
    """
    Compares row pairs column by column and notifies listeners.

    Listeners are called synchronously on the caller's thread, in the order
    they were added. An instance is not meant to be shared between threads.

    Example:
        >>> differ = DataRowDiff(["n", "2n"])
        >>> summary = DiffSummarizer()
        >>> differ.add_handler(summary)
        >>> differ.diff(DataRow({"n": "2", "2n": "4"}), DataRow({"n": "2", "2n": "44"}))
        >>> summary.row_counts[MatchStatus.WRONG]
        1
    """

    def __init__(
        self,
        columns: Iterable[str],
        settings: DiffSettings | None = None,
        metrics: DiffMetrics | None = None,
    ):
        """
        Initialize the diff engine.

        Args:
            columns: Ordered column names to compare; others are ignored
            settings: Behaviour switches (default: DiffSettings())
            metrics: Metrics sink; when omitted, the process-wide metrics
                are used if settings.metrics_enabled is set

        Raises:
            ColumnConfigurationError: If columns is empty, contains blank
                or non-string names, or repeats a name
        """
        self.settings = settings or DiffSettings()
        self._columns = _validate_columns(columns, self.settings.case_sensitive)
        self._listeners: list[DiffListener] = []

        if metrics is None and self.settings.metrics_enabled:
            metrics = get_diff_metrics()
        self.metrics = metrics

    @property
    def columns(self) -> tuple[str, ...]:
        return self._columns

    @property
    def listeners(self) -> tuple[DiffListener, ...]:
        return tuple(self._listeners)

    def add_listener(self, listener: DiffListener | DiffHandler) -> DiffListener:
        """
        Register a listener.

        A DiffHandler is wrapped in a DiffListenerAdapter. The same object
        may be registered more than once and is then notified once per
        registration.

        Returns:
            The registered listener (the adapter, for handlers)

        Raises:
            TypeError: If the object is neither a listener nor a handler
        """
        registered = as_listener(listener)
        self._listeners.append(registered)
        return registered

    def add_handler(self, handler: DiffHandler) -> DiffListener:
        """Register a typed handler through a DiffListenerAdapter."""
        adapter = DiffListenerAdapter(handler)
        self._listeners.append(adapter)
        return adapter

    def diff(self, expected_row: DataRow | None, actual_row: DataRow | None) -> None:
        """
        Compare two rows and emit the results to every listener.

        Emits one cell result per configured column, in column order,
        followed by exactly one row result.

        Args:
            expected_row: Row the test expects, or None if no row is expected
            actual_row: Row actually found, or None if there was none

        Raises:
            RowDiffError: If both rows are None, or a row has names that
                collide once case is ignored by a case-insensitive differ
            ListenerError: If listener isolation is on and any listener
                raised; raised after all events were delivered
        """
        if expected_row is None and actual_row is None:
            raise RowDiffError("Cannot diff when both expected and actual rows are absent")

        if not self.settings.tracing_enabled:
            self._run(expected_row, actual_row)
            return

        with trace_operation(
            "row_diff",
            component="rowdiff",
            columns=len(self._columns),
            listeners=len(self._listeners),
        ):
            self._run(expected_row, actual_row)

    def _lookup_row(self, row: DataRow | None) -> DataRow | None:
        """View of a row that resolves the configured columns by this differ's rules."""
        if row is None or self.settings.case_sensitive or not row.case_sensitive:
            return row
        try:
            return DataRow(row, case_sensitive=False)
        except ValueError as e:
            raise RowDiffError(f"Row columns collide when case is ignored: {e}") from e

    def _run(self, expected_row: DataRow | None, actual_row: DataRow | None) -> MatchResult:
        started = time.perf_counter()
        failures: list[tuple[Any, MatchResult, Exception]] = []
        expected_lookup = self._lookup_row(expected_row)
        actual_lookup = self._lookup_row(actual_row)

        try:
            statuses = []
            for column in self._columns:
                status = compare_cell(expected_lookup, actual_lookup, column)
                statuses.append(status)
                result = MatchResult.for_cell(
                    column,
                    status,
                    expected=self._value_of(expected_lookup, column),
                    actual=self._value_of(actual_lookup, column),
                )
                if self.settings.tracing_enabled and not status.is_success:
                    add_span_event("cell_mismatch", column=column, status=status.value)
                self._emit(result, failures)

            row_result = MatchResult.for_row(
                combine_row_status(expected_row, actual_row, statuses),
                expected=expected_row,
                actual=actual_row,
            )
            if self.settings.tracing_enabled:
                add_span_attributes(row_status=row_result.status.value)
            self._emit(row_result, failures)
        finally:
            if self.metrics is not None:
                self.metrics.observe_duration(time.perf_counter() - started)

        logger.debug(
            f"Row diff complete: columns={len(self._columns)}, "
            f"status={row_result.status.value}, listeners={len(self._listeners)}"
        )

        if failures:
            raise ListenerError(failures) from failures[0][2]
        return row_result

    @staticmethod
    def _value_of(row: DataRow | None, column: str) -> Any:
        if row is None:
            return None
        return row.get(column)

    def _emit(self, result: MatchResult, failures: list) -> None:
        if self.metrics is not None:
            if result.is_cell:
                self.metrics.record_cell(result.status)
            else:
                self.metrics.record_row(result.status)

        for listener in self._listeners:
            if not self.settings.isolate_listeners:
                listener.on_event(result)
                continue
            try:
                listener.on_event(result)
            except Exception as e:
                logger.error(
                    f"Listener {type(listener).__name__} failed on "
                    f"{result.entity_type.value} event ({result.status.value}): {e}",
                    exc_info=True,
                )
                if self.metrics is not None:
                    self.metrics.record_listener_error(type(listener).__name__)
                failures.append((listener, result, e))
