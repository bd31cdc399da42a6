"""Run report: sorted stats plus run metadata."""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from .aggregated_stat import AggregatedStat
from .history_window import HistoryWindow


@dataclass
class RunReport:
    """Everything a renderer needs for one run."""

    generated_at: datetime
    total_targets: int
    keyword: Optional[str]
    stats: List[AggregatedStat]
    history: HistoryWindow

    def to_dict(self) -> dict:
        return {
            'generated_at': self.generated_at.isoformat(),
            'total_targets': self.total_targets,
            'keyword': self.keyword,
            'stats': [s.to_dict() for s in self.stats],
            'history': self.history.to_list(),
        }
