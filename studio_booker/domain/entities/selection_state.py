from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionState:
    labels: tuple[str, ...] = ()  # chosen slot labels, grid order

    @property
    def status(self) -> str:
        return "partial" if self.labels else "empty"

    @property
    def last_label(self) -> str | None:
        return self.labels[-1] if self.labels else None

    def __contains__(self, label: object) -> bool:
        return label in self.labels

    def __len__(self) -> int:
        return len(self.labels)
