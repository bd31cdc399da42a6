"""Configuration: file settings and run parameters."""
from .settings import settings, Settings
from .monitor_config import MonitorConfig, DEFAULT_KEYWORD

__all__ = [
    'settings',
    'Settings',
    'MonitorConfig',
    'DEFAULT_KEYWORD',
]
