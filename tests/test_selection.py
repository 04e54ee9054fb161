"""
Tests for the contiguous slot selection.
"""

from __future__ import annotations

import pytest

from studio_booker.application.exceptions import ContiguitySelectionRejected
from studio_booker.application.utils.slot_grid import time_slots
from studio_booker.domain.entities.selection_state import SelectionState

from conftest import make_new_booking


def test_first_pick_starts_selection(selection_use_case):
    state = selection_use_case.toggle(SelectionState(), "14:00", [])
    assert state.labels == ("14:00",)
    assert state.status == "partial"


def test_adjacent_pick_appends_and_gap_is_rejected(selection_use_case):
    """14:00 then 14:30 is accepted; 15:30 after that is refused."""
    state = selection_use_case.toggle(SelectionState(labels=("14:00",)), "14:30", [])
    assert state.labels == ("14:00", "14:30")

    with pytest.raises(ContiguitySelectionRejected) as exc_info:
        selection_use_case.toggle(state, "15:30", [])
    assert exc_info.value.last_label == "14:30"
    assert state.labels == ("14:00", "14:30")


def test_pick_before_selection_is_rejected(selection_use_case):
    state = SelectionState(labels=("14:00", "14:30"))
    with pytest.raises(ContiguitySelectionRejected):
        selection_use_case.toggle(state, "13:30", [])


def test_only_next_index_is_accepted(selection_use_case):
    state = SelectionState(labels=("10:00",))
    accepted = []
    for label in time_slots():
        if label in state:
            continue
        try:
            selection_use_case.toggle(state, label, [])
        except ContiguitySelectionRejected:
            continue
        accepted.append(label)
    assert accepted == ["10:30"]


def test_deselect_truncates_tail(selection_use_case):
    """Deselecting the k-th label keeps only labels before it."""
    state = SelectionState(labels=("14:00", "14:30", "15:00", "15:30"))

    assert selection_use_case.toggle(state, "15:00", []).labels == ("14:00", "14:30")
    assert selection_use_case.toggle(state, "14:00", []).labels == ()
    assert selection_use_case.toggle(state, "15:30", []).labels == ("14:00", "14:30", "15:00")


def test_occupied_slot_is_ignored(store, selection_use_case):
    store.create(make_new_booking(start_time="15:00", duration=1))
    bookings = store.list_by_date("2024-06-01")

    empty = SelectionState()
    assert selection_use_case.toggle(empty, "15:00", bookings) == empty

    state = SelectionState(labels=("14:00", "14:30"))
    assert selection_use_case.toggle(state, "15:00", bookings) == state


def test_reset_empties_selection(selection_use_case):
    assert selection_use_case.reset().status == "empty"
