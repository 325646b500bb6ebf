"""
Support modules for the row diff engine

Provides:
- logging: Structured logging setup and context-aware loggers
- metrics: Prometheus counters for diff outcomes
- tracing: OpenTelemetry spans around diff calls
"""

__version__ = "1.0.0"
__all__ = ["logging", "metrics", "tracing"]
