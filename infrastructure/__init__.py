"""Infrastructure layer - file-backed repositories and rendering."""
from .repositories import JsonTargetRegistry, JsonHistoryStore, ReportEmbeddedHistoryStore
from .rendering import MarkdownReportRenderer, ReportPublisher

__all__ = [
    'JsonTargetRegistry',
    'JsonHistoryStore',
    'ReportEmbeddedHistoryStore',
    'MarkdownReportRenderer',
    'ReportPublisher',
]
