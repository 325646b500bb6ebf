"""
Metrics for row diff operations.

Counts cell and row outcomes by status, listener failures, and the time
spent per diff call.
"""

import logging

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

from .registry import get_or_create_metric

logger = logging.getLogger(__name__)


class DiffMetrics:
    """
    Prometheus metrics for row comparisons

    Safe to instantiate more than once against the same registry; later
    instances share the collectors registered by the first.
    """

    def __init__(self, registry: CollectorRegistry | None = None):
        """
        Args:
            registry: Custom Prometheus registry (default: global REGISTRY)
        """
        self.registry = registry or REGISTRY

        self.cells_compared_total = get_or_create_metric(
            lambda: Counter(
                "rowdiff_cells_compared_total",
                "Total number of cells compared, by match status",
                ["status"],
                registry=self.registry,
            ),
            "rowdiff_cells_compared_total",
            self.registry,
        )

        self.rows_compared_total = get_or_create_metric(
            lambda: Counter(
                "rowdiff_rows_compared_total",
                "Total number of rows compared, by match status",
                ["status"],
                registry=self.registry,
            ),
            "rowdiff_rows_compared_total",
            self.registry,
        )

        self.listener_errors_total = get_or_create_metric(
            lambda: Counter(
                "rowdiff_listener_errors_total",
                "Total number of exceptions raised by diff listeners",
                ["listener"],
                registry=self.registry,
            ),
            "rowdiff_listener_errors_total",
            self.registry,
        )

        self.diff_duration_seconds = get_or_create_metric(
            lambda: Histogram(
                "rowdiff_diff_duration_seconds",
                "Time to compare one row pair and notify listeners",
                buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
                registry=self.registry,
            ),
            "rowdiff_diff_duration_seconds",
            self.registry,
        )

    def record_cell(self, status: str) -> None:
        """
        Count one compared cell

        Args:
            status: Match status value (SUCCESS, WRONG, MISSING, SURPLUS)
        """
        self.cells_compared_total.labels(status=str(status)).inc()

    def record_row(self, status: str) -> None:
        """
        Count one compared row

        Args:
            status: Match status value (SUCCESS, WRONG, MISSING, SURPLUS)
        """
        self.rows_compared_total.labels(status=str(status)).inc()

    def record_listener_error(self, listener_name: str) -> None:
        self.listener_errors_total.labels(listener=listener_name).inc()
        logger.debug(f"Recorded listener error: listener={listener_name}")

    def observe_duration(self, seconds: float) -> None:
        self.diff_duration_seconds.observe(seconds)


_default_metrics: DiffMetrics | None = None


def get_diff_metrics() -> DiffMetrics:
    """Return the process-wide DiffMetrics bound to the global registry."""
    global _default_metrics
    if _default_metrics is None:
        _default_metrics = DiffMetrics()
    return _default_metrics
