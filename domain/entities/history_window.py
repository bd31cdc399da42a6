"""Rolling, length-capped history of daily snapshots."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from ..errors import HistoryDecodeError
from .snapshot import DailySnapshot


@dataclass
class HistoryWindow:
    """Ordered snapshots, oldest first, never longer than ``max_days``.

    The window is owned by a single run: loaded at start, appended to
    once, then handed back to the history store.
    """

    max_days: int
    snapshots: List[DailySnapshot] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.max_days < 1:
            raise ValueError("max_days must be >= 1")
        self._enforce_cap()

    def __len__(self) -> int:
        return len(self.snapshots)

    def __iter__(self) -> Iterator[DailySnapshot]:
        return iter(self.snapshots)

    @property
    def latest(self) -> Optional[DailySnapshot]:
        return self.snapshots[-1] if self.snapshots else None

    def append(self, snapshot: DailySnapshot, *, dedupe_same_day: bool = False) -> None:
        """Append a snapshot, evicting the oldest entries past the cap.

        With ``dedupe_same_day`` an existing snapshot for the same date is
        replaced instead of kept alongside the new one.
        """
        if dedupe_same_day:
            self.snapshots = [s for s in self.snapshots if s.day != snapshot.day]
        self.snapshots.append(snapshot)
        self._enforce_cap()

    def recent(self, count: int) -> List[DailySnapshot]:
        """Up to ``count`` most recent snapshots, oldest first."""
        if count <= 0:
            return []
        return self.snapshots[-count:]

    def _enforce_cap(self) -> None:
        overflow = len(self.snapshots) - self.max_days
        if overflow > 0:
            del self.snapshots[:overflow]

    def to_list(self) -> List[dict]:
        return [s.to_dict() for s in self.snapshots]

    @classmethod
    def from_list(cls, raw: Any, *, max_days: int) -> "HistoryWindow":
        """Decode a stored array of snapshots.

        Individual bad entries are skipped; a payload that is not a list
        raises HistoryDecodeError.
        """
        if not isinstance(raw, list):
            raise HistoryDecodeError(f"history must be a list, got {type(raw).__name__}")
        snapshots = []
        for item in raw:
            snap = DailySnapshot.from_dict(item)
            if snap is not None:
                snapshots.append(snap)
        return cls(max_days=max_days, snapshots=snapshots)
