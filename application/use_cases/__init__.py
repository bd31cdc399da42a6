"""Application use cases."""
from .run_health_check import RunHealthCheckUseCase

__all__ = [
    'RunHealthCheckUseCase',
]
