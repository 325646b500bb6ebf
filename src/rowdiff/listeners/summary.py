"""
Handler that tallies diff outcomes across many rows.

Useful for the pass/fail line at the bottom of a report: how many rows and
cells matched, and which rows did not.
"""

from collections import Counter
from typing import Any

from ..result import MatchResult
from ..status import MatchStatus
from .base import DiffHandler


class DiffSummarizer(DiffHandler):
    """Counts cell and row statuses over any number of diff calls."""

    def __init__(self):
        self.cell_counts: Counter[MatchStatus] = Counter()
        self.row_counts: Counter[MatchStatus] = Counter()
        self.failed_rows: list[MatchResult] = []

    def end_cell(self, result: MatchResult) -> None:
        self.cell_counts[result.status] += 1

    def end_row(self, result: MatchResult) -> None:
        self.row_counts[result.status] += 1
        if not result.is_success:
            self.failed_rows.append(result)

    @property
    def rows_compared(self) -> int:
        return sum(self.row_counts.values())

    @property
    def cells_compared(self) -> int:
        return sum(self.cell_counts.values())

    @property
    def all_passed(self) -> bool:
        """True when every row compared so far succeeded (vacuously for none)."""
        return not self.failed_rows

    def as_dict(self) -> dict[str, Any]:
        """
        Summarize counts for serialization

        Returns:
            Dictionary with rows/cells totals and per-status counts, every
            status present with zero when it never occurred
        """
        return {
            "rows_compared": self.rows_compared,
            "cells_compared": self.cells_compared,
            "all_passed": self.all_passed,
            "rows": {status.value: self.row_counts[status] for status in MatchStatus},
            "cells": {status.value: self.cell_counts[status] for status in MatchStatus},
        }

    def reset(self) -> None:
        self.cell_counts.clear()
        self.row_counts.clear()
        self.failed_rows.clear()
