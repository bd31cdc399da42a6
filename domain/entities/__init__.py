"""Domain entities."""
from .target import Target
from .probe_outcome import ProbeOutcome
from .snapshot import DailySnapshot
from .history_window import HistoryWindow
from .aggregated_stat import AggregatedStat
from .run_report import RunReport

__all__ = [
    'Target',
    'ProbeOutcome',
    'DailySnapshot',
    'HistoryWindow',
    'AggregatedStat',
    'RunReport',
]
