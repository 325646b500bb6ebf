"""
Comparison outcome enumeration.

A closed set of four statuses; every cell and row comparison resolves to
exactly one of them.
"""

from enum import Enum


class MatchStatus(str, Enum):
    """
    Outcome of comparing an expected entity with an actual one.

    Inherits from str so statuses serialize to JSON and compare equal
    to their plain string values.
    """

    SUCCESS = "SUCCESS"
    WRONG = "WRONG"
    MISSING = "MISSING"
    SURPLUS = "SURPLUS"

    @property
    def is_success(self) -> bool:
        return self is MatchStatus.SUCCESS

    @property
    def is_absence(self) -> bool:
        """True for the statuses that describe a value present on one side only."""
        return self in (MatchStatus.MISSING, MatchStatus.SURPLUS)

    def __str__(self) -> str:
        return self.value
