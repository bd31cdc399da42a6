"""Domain enumerations."""
from .search_status import SearchStatus
from .health_status import HealthStatus
from .trend_mark import TrendMark

__all__ = [
    'SearchStatus',
    'HealthStatus',
    'TrendMark',
]
