"""Label change report models."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class ChangeStatus(enum.Enum):
    UNCHANGED = "unchanged"
    LABELED = "labeled"


@dataclass
class DocumentChange:
    index: int
    kind: str
    name: str
    status: ChangeStatus
    details: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.status != ChangeStatus.UNCHANGED


@dataclass
class ChangeReport:
    changes: list[DocumentChange] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return any(c.changed for c in self.changes)

    @property
    def summary(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for c in self.changes:
            key = c.status.value
            counts[key] = counts.get(key, 0) + 1
        return counts
