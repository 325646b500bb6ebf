"""
Row and cell value containers.

DataRow maps column names to values and hides how names are matched
(case-sensitive or not) behind a single lookup path. DataCell is one named
value. Values are compared through normalise_value so that equality is the
same operation everywhere in the engine.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any


def normalise_value(value: Any) -> str | None:
    """
    Render a value into its comparable text form.

    Args:
        value: Raw column value (string, number, bytes, ...)

    Returns:
        None for the "no value" marker, otherwise a string. Byte values are
        rendered as lowercase hex, booleans as "true"/"false".
    """
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def values_equal(expected: Any, actual: Any) -> bool:
    """Compare two raw values by their normalised form."""
    return normalise_value(expected) == normalise_value(actual)


def normalise_name(name: str, case_sensitive: bool = True) -> str:
    """
    Normalise a column name for lookups.

    Case-insensitive names are stripped and lower-cased; case-sensitive
    names are used exactly as given.
    """
    if case_sensitive:
        return name
    return name.strip().lower()


@dataclass(frozen=True)
class DataCell:
    """A single named value."""

    name: str
    value: Any

    @property
    def text(self) -> str | None:
        return normalise_value(self.value)

    def matches(self, other: "DataCell") -> bool:
        return values_equal(self.value, other.value)


class DataRow(Mapping):
    """
    Immutable mapping from column name to value.

    Args:
        values: Mapping or iterable of (name, value) pairs
        case_sensitive: When False, names are matched ignoring case and
            surrounding whitespace, both at construction and on lookup

    Raises:
        ValueError: If a column name is not a string, or two names collide
            after normalisation

    Example:
        >>> row = DataRow({"ID": 1, "Name": "x"}, case_sensitive=False)
        >>> row.get("id")
        1
    """

    def __init__(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
        case_sensitive: bool = True,
    ):
        self._case_sensitive = case_sensitive
        self._values: dict[str, Any] = {}
        self._names: dict[str, str] = {}

        pairs = values.items() if isinstance(values, Mapping) else (values or ())
        for name, value in pairs:
            if not isinstance(name, str):
                raise ValueError(f"Column name must be a string, got {type(name).__name__}")
            key = normalise_name(name, case_sensitive)
            if key in self._values:
                raise ValueError(
                    f"Duplicate column name: {name!r} collides with {self._names[key]!r}"
                )
            self._values[key] = value
            self._names[key] = name

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names as supplied, in insertion order."""
        return tuple(self._names.values())

    def __getitem__(self, name: str) -> Any:
        return self._values[normalise_name(name, self._case_sensitive)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = ", ".join(f"{name!r}: {self[name]!r}" for name in self)
        return f"DataRow({{{items}}})"

    def has(self, name: str) -> bool:
        """True when the column is present, even if its value is None."""
        return normalise_name(name, self._case_sensitive) in self._values

    def cell(self, name: str) -> DataCell | None:
        """Return the named cell, or None if the row has no such column."""
        if not self.has(name):
            return None
        key = normalise_name(name, self._case_sensitive)
        return DataCell(self._names[key], self._values[key])

    def cells(self) -> list[DataCell]:
        return [DataCell(self._names[key], value) for key, value in self._values.items()]
