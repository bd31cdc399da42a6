"""Application layer - Services and use cases."""
from .services import Aggregator, BoundedScheduler, Prober, RetryPolicy
from .use_cases import RunHealthCheckUseCase

__all__ = [
    'Aggregator',
    'BoundedScheduler',
    'Prober',
    'RetryPolicy',
    'RunHealthCheckUseCase',
]
