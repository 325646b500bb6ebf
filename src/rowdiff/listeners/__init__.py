"""
Diff event listeners.

Contracts (DiffListener, DiffHandler), the adapter between them, and a few
ready-made observers for recording, summarizing, logging and metrics.
"""

from .base import DiffHandler, DiffListener, DiffListenerAdapter, as_listener
from .log import LoggingDiffListener
from .metrics import MetricsDiffHandler
from .recording import RecordingDiffListener
from .summary import DiffSummarizer

__all__ = [
    "DiffListener",
    "DiffHandler",
    "DiffListenerAdapter",
    "as_listener",
    "RecordingDiffListener",
    "DiffSummarizer",
    "LoggingDiffListener",
    "MetricsDiffHandler",
]
