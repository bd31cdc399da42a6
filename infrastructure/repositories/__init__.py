"""Infrastructure repositories module."""
from .target_registry import JsonTargetRegistry
from .history_repository import JsonHistoryStore, ReportEmbeddedHistoryStore

__all__ = [
    'JsonTargetRegistry',
    'JsonHistoryStore',
    'ReportEmbeddedHistoryStore',
]
