from __future__ import annotations

import logging
from typing import Iterable

from studio_booker.application.exceptions import ContiguitySelectionRejected
from studio_booker.application.utils.slot_grid import slot_index, slot_status
from studio_booker.domain.entities.booking import Booking
from studio_booker.domain.entities.selection_state import SelectionState
from studio_booker.domain.entities.slot import SlotStatus


class SelectionUseCase:
    """Contiguous half-hour slot selection on the booking form."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def toggle(
        self,
        current_state: SelectionState,
        label: str,
        bookings: Iterable[Booking],
        date: str | None = None,
    ) -> SelectionState:
        """
        Apply a click on slot `label` and return the new selection.

        Occupied slots are ignored. Clicking a selected slot drops it and every
        slot after it. A new slot must extend the selection at its tail,
        otherwise ContiguitySelectionRejected is raised and nothing changes.
        """
        index = slot_index(label)

        if slot_status(label, bookings, date) != SlotStatus.free:
            return current_state

        if label in current_state:
            return SelectionState(
                labels=tuple(t for t in current_state.labels if slot_index(t) < index)
            )

        last_label = current_state.last_label
        if last_label is None:
            return SelectionState(labels=(label,))

        if index != slot_index(last_label) + 1:
            self._logger.info(
                "Non-contiguous slot rejected",
                extra={"date": date, "reason": f"{label} after {last_label}"},
            )
            raise ContiguitySelectionRejected(label, last_label)

        return SelectionState(labels=current_state.labels + (label,))

    def reset(self) -> SelectionState:
        return SelectionState()
