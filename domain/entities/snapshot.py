"""Daily snapshot entity."""
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Tuple

from .probe_outcome import ProbeOutcome


@dataclass(frozen=True)
class DailySnapshot:
    """All probe outcomes recorded by one run, dated by calendar day."""

    day: date
    outcomes: Tuple[ProbeOutcome, ...] = ()

    def find(self, endpoint_url: str) -> Optional[ProbeOutcome]:
        """Return the first outcome recorded for ``endpoint_url``, if any."""
        for outcome in self.outcomes:
            if outcome.endpoint_url == endpoint_url:
                return outcome
        return None

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["DailySnapshot"]:
        """Decode ``{date, results}``; returns None when the entry is unusable."""
        if not isinstance(raw, dict):
            return None
        try:
            day = date.fromisoformat(str(raw.get("date")))
        except ValueError:
            return None
        results = raw.get("results")
        if not isinstance(results, list):
            return None
        outcomes = []
        for item in results:
            outcome = ProbeOutcome.from_dict(item)
            if outcome is not None:
                outcomes.append(outcome)
        return cls(day=day, outcomes=tuple(outcomes))

    def to_dict(self) -> dict:
        return {
            'date': self.day.isoformat(),
            'results': [o.to_dict() for o in self.outcomes],
        }
