from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SlotStatus(str, Enum):
    free = "free"
    pending = "pending"
    approved = "approved"


@dataclass(frozen=True)
class Slot:
    time: str  # HH:MM
    index: int  # 0-47
    status: SlotStatus = SlotStatus.free

    @property
    def is_free(self) -> bool:
        return self.status == SlotStatus.free
