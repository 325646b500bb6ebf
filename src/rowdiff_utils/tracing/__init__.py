"""
OpenTelemetry tracing for diff runs.

Nothing is exported until initialize_tracing() is called. With
DiffSettings(tracing_enabled=True) each DataRowDiff.diff call opens a
row_diff span and adds a cell_mismatch event per failing cell.
"""

from .context import add_span_attributes, add_span_event, trace_operation
from .tracer import (
    get_tracer,
    get_tracer_provider,
    initialize_tracing,
    shutdown_tracing,
)

__all__ = [
    "initialize_tracing",
    "get_tracer",
    "get_tracer_provider",
    "shutdown_tracing",
    "trace_operation",
    "add_span_attributes",
    "add_span_event",
]
