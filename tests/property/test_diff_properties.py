"""
Property-based tests for the row diff engine using Hypothesis.

Tests invariants that should hold for all inputs:
- Event count and ordering
- Status rules for absent rows
- Row status as a function of cell statuses
- Column scoping and repeatability
"""

import os

import pytest
from hypothesis import assume, given, settings, strategies as st

from rowdiff import (
    DataRow,
    DataRowDiff,
    DiffListenerAdapter,
    DiffSummarizer,
    MatchStatus,
    RecordingDiffListener,
)

# Configuration for hypothesis (no per-example deadline)
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("thorough", max_examples=500, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

pytestmark = pytest.mark.property

column_names = st.lists(
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789_", min_size=1, max_size=8),
    min_size=1,
    max_size=8,
    unique=True,
)
values = st.one_of(st.none(), st.text(max_size=5), st.integers(-100, 100))


@st.composite
def columns_and_row(draw):
    """Column list plus a row holding a random subset of those columns (and maybe others)."""
    columns = draw(column_names)
    present = draw(st.lists(st.sampled_from(columns), unique=True))
    extra = draw(st.dictionaries(st.just("ZZ-extra"), values, max_size=1))
    row = {name: draw(values) for name in present}
    row.update(extra)
    return columns, DataRow(row)


def run(columns, expected, actual):
    recorder = RecordingDiffListener()
    differ = DataRowDiff(columns)
    differ.add_listener(recorder)
    differ.diff(expected, actual)
    return recorder.results


@given(data=columns_and_row(), other=st.data())
def test_n_cell_events_then_one_row_event(data, other):
    """Every diff emits one event per column, then exactly one row event."""
    columns, expected = data
    actual = other.draw(st.one_of(st.none(), st.just(expected)))

    results = run(columns, expected, actual)

    assert len(results) == len(columns) + 1
    assert all(r.is_cell for r in results[:-1])
    assert results[-1].is_row
    assert [r.name for r in results[:-1]] == columns


@given(data=columns_and_row())
def test_identical_rows_succeed(data):
    columns, row = data
    copy = DataRow(dict(row))

    results = run(columns, row, copy)

    assert all(r.status is MatchStatus.SUCCESS for r in results)


@given(data=columns_and_row())
def test_absent_actual_row_is_missing_everywhere(data):
    columns, expected = data

    results = run(columns, expected, None)

    assert {r.status for r in results} == {MatchStatus.MISSING}


@given(data=columns_and_row())
def test_absent_expected_row_is_surplus_everywhere(data):
    columns, actual = data

    results = run(columns, None, actual)

    assert {r.status for r in results} == {MatchStatus.SURPLUS}


@given(first=columns_and_row(), second=st.data())
def test_row_success_iff_all_cells_succeed(first, second):
    """For two present rows the row is SUCCESS or WRONG, decided by its cells."""
    columns, expected = first
    actual = DataRow(second.draw(st.dictionaries(st.sampled_from(columns), values)))

    results = run(columns, expected, actual)

    cells_ok = all(r.is_success for r in results[:-1])
    expected_status = MatchStatus.SUCCESS if cells_ok else MatchStatus.WRONG
    assert results[-1].status is expected_status


@given(data=columns_and_row(), replacement=values)
def test_changes_outside_scope_are_ignored(data, replacement):
    columns, expected = data
    assume(len(columns) > 1)
    scope, ignored = columns[:-1], columns[-1]
    changed = dict(expected)
    changed[ignored] = "changed" if replacement == expected.get(ignored) else replacement

    full_results = run(scope, expected, DataRow(changed))

    assert all(r.is_success for r in full_results)


@settings(max_examples=50)
@given(data=columns_and_row(), other=st.data())
def test_repeated_diffs_are_identical(data, other):
    """No hidden state is carried between calls."""
    columns, expected = data
    actual = other.draw(st.one_of(st.none(), st.just(DataRow({columns[0]: "x"}))))

    assert run(columns, expected, actual) == run(columns, expected, actual)


@given(data=columns_and_row())
def test_adapter_never_crosses_callbacks(data):
    columns, expected = data
    summary = DiffSummarizer()
    differ = DataRowDiff(columns)
    differ.add_listener(DiffListenerAdapter(summary))

    differ.diff(expected, None)

    assert summary.cells_compared == len(columns)
    assert summary.rows_compared == 1


def test_profile_has_no_deadline():
    assert settings.default.deadline is None
