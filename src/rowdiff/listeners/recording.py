"""
Listener that keeps every event it receives.
"""

from ..result import MatchResult
from ..status import MatchStatus
from .base import DiffListener


class RecordingDiffListener(DiffListener):
    """Stores results in emission order."""

    def __init__(self):
        self.results: list[MatchResult] = []

    def on_event(self, result: MatchResult) -> None:
        self.results.append(result)

    @property
    def cell_results(self) -> list[MatchResult]:
        return [r for r in self.results if r.is_cell]

    @property
    def row_results(self) -> list[MatchResult]:
        return [r for r in self.results if r.is_row]

    def statuses(self) -> list[MatchStatus]:
        return [r.status for r in self.results]

    def clear(self) -> None:
        self.results.clear()
