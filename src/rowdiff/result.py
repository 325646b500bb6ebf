"""
Comparison event payloads.

A MatchResult describes the outcome of comparing one entity, either a cell
or a whole row. The entity kind is a closed enum so dispatch on it can be
exhaustive.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .status import MatchStatus


class EntityType(str, Enum):
    """Kind of entity a MatchResult describes."""

    CELL = "cell"
    ROW = "row"


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of comparing one expected entity against one actual entity.

    For cell results, expected/actual are the raw column values (None when
    absent) and name is the column name. For row results they are the rows
    themselves (None when the row is absent) and name is None.
    """

    entity_type: EntityType
    status: MatchStatus
    expected: Any = None
    actual: Any = None
    name: str | None = None

    @classmethod
    def for_cell(
        cls, name: str, status: MatchStatus, expected: Any, actual: Any
    ) -> "MatchResult":
        return cls(EntityType.CELL, status, expected, actual, name)

    @classmethod
    def for_row(cls, status: MatchStatus, expected: Any, actual: Any) -> "MatchResult":
        return cls(EntityType.ROW, status, expected, actual)

    @property
    def is_success(self) -> bool:
        return self.status.is_success

    @property
    def is_cell(self) -> bool:
        return self.entity_type is EntityType.CELL

    @property
    def is_row(self) -> bool:
        return self.entity_type is EntityType.ROW

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        expected, actual = self.expected, self.actual
        if self.is_row:
            expected = dict(expected) if expected is not None else None
            actual = dict(actual) if actual is not None else None
        return {
            "entity_type": self.entity_type.value,
            "status": self.status.value,
            "name": self.name,
            "expected": expected,
            "actual": actual,
        }
