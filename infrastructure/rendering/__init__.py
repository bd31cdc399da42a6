"""Infrastructure rendering module."""
from .markdown_report import MarkdownReportRenderer, ReportPublisher, sync_readme

__all__ = [
    'MarkdownReportRenderer',
    'ReportPublisher',
    'sync_readme',
]
