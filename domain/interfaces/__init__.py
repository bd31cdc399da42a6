"""Domain interfaces."""
from .repository import ITargetRegistry, IHistoryStore, IReportRenderer

__all__ = [
    'ITargetRegistry',
    'IHistoryStore',
    'IReportRenderer',
]
