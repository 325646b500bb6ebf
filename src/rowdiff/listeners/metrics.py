"""
Handler that forwards outcomes to Prometheus counters.
"""

from rowdiff_utils.metrics import DiffMetrics, get_diff_metrics

from ..result import MatchResult
from .base import DiffHandler


class MetricsDiffHandler(DiffHandler):
    """
    Counts each cell and row result by status.

    Args:
        metrics: Metrics sink (default: process-wide DiffMetrics)
    """

    def __init__(self, metrics: DiffMetrics | None = None):
        self.metrics = metrics or get_diff_metrics()

    def end_cell(self, result: MatchResult) -> None:
        self.metrics.record_cell(result.status)

    def end_row(self, result: MatchResult) -> None:
        self.metrics.record_row(result.status)
