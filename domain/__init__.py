"""Domain layer - Entities, enums, errors and interfaces."""
from .entities import (
    Target, ProbeOutcome, DailySnapshot, HistoryWindow, AggregatedStat, RunReport,
)
from .enums import SearchStatus, HealthStatus, TrendMark
from .errors import MonitorError, TargetRegistryError, HistoryDecodeError
from .interfaces import ITargetRegistry, IHistoryStore, IReportRenderer

__all__ = [
    # Entities
    'Target',
    'ProbeOutcome',
    'DailySnapshot',
    'HistoryWindow',
    'AggregatedStat',
    'RunReport',
    # Enums
    'SearchStatus',
    'HealthStatus',
    'TrendMark',
    # Errors
    'MonitorError',
    'TargetRegistryError',
    'HistoryDecodeError',
    # Interfaces
    'ITargetRegistry',
    'IHistoryStore',
    'IReportRenderer',
]
