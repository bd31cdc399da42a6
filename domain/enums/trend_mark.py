"""Trend symbols for the recent-history summary string."""
from enum import Enum


class TrendMark(Enum):
    SUCCESS = "✅"
    FAILURE = "❌"
    NO_DATA = "-"
