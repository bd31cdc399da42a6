"""Health status enumeration for aggregated targets."""
from enum import Enum


class HealthStatus(Enum):
    """Classification of a target after aggregation.

    Provides:
    - mark: symbol shown in reports
    - rank: sort key, most severe first
    """

    WARN_STREAK = "WARN_STREAK"
    DOWN = "DOWN"
    OK = "OK"
    DISABLED = "DISABLED"

    @property
    def mark(self) -> str:
        """Get report symbol."""
        marks = {
            "WARN_STREAK": "🚨",
            "DOWN": "❌",
            "OK": "✅",
            "DISABLED": "🚫",
        }
        return marks[self.value]

    @property
    def rank(self) -> int:
        """Get severity rank (lower sorts first)."""
        order = {
            "WARN_STREAK": 1,
            "DOWN": 2,
            "OK": 3,
            "DISABLED": 4,
        }
        return order[self.value]
