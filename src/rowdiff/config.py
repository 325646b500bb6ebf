"""
Engine settings.

Settings default to the behaviour library callers expect and can be
overridden from environment variables:

    ROWDIFF_CASE_SENSITIVE: Match column names exactly (default: true)
    ROWDIFF_ISOLATE_LISTENERS: Keep delivering events when a listener
        raises, then report the failures (default: true)
    ROWDIFF_TRACING: Wrap each diff in an OpenTelemetry span (default: false)
    ROWDIFF_METRICS: Count outcomes in Prometheus metrics (default: false)
"""

import os
from dataclasses import dataclass

TRUE_VALUES = ("true", "1", "yes")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUE_VALUES


@dataclass(frozen=True)
class DiffSettings:
    """
    Behaviour switches for DataRowDiff.

    With case_sensitive=False the configured columns are matched against
    row names ignoring case and surrounding whitespace, whatever the rows
    themselves were built with.
    """

    case_sensitive: bool = True
    isolate_listeners: bool = True
    tracing_enabled: bool = False
    metrics_enabled: bool = False

    @classmethod
    def from_env(cls) -> "DiffSettings":
        """Build settings from ROWDIFF_* environment variables."""
        return cls(
            case_sensitive=_env_flag("ROWDIFF_CASE_SENSITIVE", True),
            isolate_listeners=_env_flag("ROWDIFF_ISOLATE_LISTENERS", True),
            tracing_enabled=_env_flag("ROWDIFF_TRACING", False),
            metrics_enabled=_env_flag("ROWDIFF_METRICS", False),
        )
