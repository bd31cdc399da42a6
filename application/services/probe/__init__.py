from .retry_policy import RetryPolicy
from .prober import Prober, UnhealthyStatus

__all__ = [
    "RetryPolicy",
    "Prober",
    "UnhealthyStatus",
]
