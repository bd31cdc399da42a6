"""Aggregated per-target statistics handed to the renderer."""
from dataclasses import dataclass
from typing import Optional

from ..enums import HealthStatus, SearchStatus
from .target import Target


@dataclass(frozen=True)
class AggregatedStat:
    """Derived view of one target over the whole history window."""

    target: Target
    status: HealthStatus
    success_count: int
    failure_count: int
    # Percentage rounded to one decimal, None when nothing was recorded.
    success_rate: Optional[float]
    trend: str
    current_streak: int
    latest_search_status: SearchStatus

    @property
    def success_rate_label(self) -> str:
        """Rate as shown in reports: ``"87.5%"`` or ``"-"``."""
        if self.success_rate is None:
            return "-"
        return f"{self.success_rate:.1f}%"

    def to_dict(self) -> dict:
        """Convert stat to dictionary."""
        return {
            **self.target.to_dict(),
            'status': self.status.value,
            'ok': self.success_count,
            'fail': self.failure_count,
            'successRate': self.success_rate_label,
            'trend': self.trend,
            'streak': self.current_streak,
            'searchStatus': self.latest_search_status.value,
        }
