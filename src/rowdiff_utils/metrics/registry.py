"""
Helpers for registering Prometheus collectors more than once.
"""

from typing import Callable, TypeVar

from prometheus_client import REGISTRY, CollectorRegistry

T = TypeVar("T")


def get_or_create_metric(
    metric_factory: Callable[[], T],
    metric_name: str,
    registry: CollectorRegistry = REGISTRY,
) -> T:
    """
    Create a metric, or return the one already registered under that name.

    Args:
        metric_factory: Callable that creates the metric (e.g., lambda: Counter(...))
        metric_name: Name of the metric for lookup if already registered
        registry: Prometheus registry the factory registers into

    Returns:
        The metric instance (either newly created or existing)

    Example:
        CELLS = get_or_create_metric(
            lambda: Counter("rowdiff_cells_compared_total", "Cells", ["status"]),
            "rowdiff_cells_compared_total",
        )
    """
    try:
        return metric_factory()
    except ValueError:
        existing = registry._names_to_collectors.get(metric_name)
        if existing is not None:
            return existing
        raise
