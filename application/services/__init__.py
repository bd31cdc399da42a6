"""Application services root exports."""
from .aggregator import Aggregator, AggregationRules
from .scheduler import BoundedScheduler
from .probe import Prober, RetryPolicy

__all__ = [
    "Aggregator",
    "AggregationRules",
    "BoundedScheduler",
    "Prober",
    "RetryPolicy",
]
