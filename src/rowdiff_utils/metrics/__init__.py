"""
Prometheus metrics for the row diff engine

Usage:
    from rowdiff_utils.metrics import DiffMetrics

    metrics = DiffMetrics()
    metrics.record_cell("WRONG")
    metrics.record_row("WRONG")
"""

from .diff import DiffMetrics, get_diff_metrics
from .registry import get_or_create_metric

__all__ = [
    "DiffMetrics",
    "get_diff_metrics",
    "get_or_create_metric",
]
