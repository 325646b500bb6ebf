"""
Pytest configuration and fixtures for row diff tests.
Provides shared row builders, listeners and an isolated metrics registry.
"""

import os

import pytest
from prometheus_client import CollectorRegistry

from rowdiff import DataRow, RecordingDiffListener

COLUMNS = ["n", "2n"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "property: mark test as property-based test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def clear_rowdiff_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ROWDIFF_* variables from the outer shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("ROWDIFF_"):
            monkeypatch.delenv(key)


@pytest.fixture
def columns() -> list[str]:
    return list(COLUMNS)


@pytest.fixture
def make_row():
    """Build a row over the default columns from positional values."""
    def _make_row(*items) -> DataRow:
        return DataRow({COLUMNS[i]: str(item) for i, item in enumerate(items)})
    return _make_row


@pytest.fixture
def recorder() -> RecordingDiffListener:
    return RecordingDiffListener()


@pytest.fixture
def registry() -> CollectorRegistry:
    """Fresh Prometheus registry so counters start at zero."""
    return CollectorRegistry()
