from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from core.logging.logger import StructuredLogger


RetryPredicate = Callable[[BaseException], bool]
Supplier = Callable[[], Awaitable[Any]]
Sleeper = Callable[[float], Awaitable[Any]]


@dataclass(slots=True)
class RetryPolicy:
    """Fixed-delay retry: up to ``max_attempts`` tries, ``delay_ms`` between them.

    No delay follows the last attempt, so a call that succeeds on attempt
    ``n`` has slept exactly ``n - 1`` times.
    """
    max_attempts: int
    delay_ms: int
    sleep: Sleeper = asyncio.sleep

    @classmethod
    def from_config(cls, config: Any, *, sleep: Optional[Sleeper] = None) -> "RetryPolicy":
        """Create policy from a MonitorConfig."""
        return cls(
            max_attempts=max(1, config.max_retry),
            delay_ms=max(0, config.retry_delay_ms),
            sleep=sleep or asyncio.sleep,
        )

    async def run(
        self,
        supplier: Supplier,
        *,
        is_retryable: RetryPredicate,
        logger: StructuredLogger,
        context: dict[str, Any] | None = None,
    ) -> Any:
        """Execute an async supplier, retrying while ``is_retryable`` says so.

        The last exception is re-raised once attempts are exhausted.
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                return await supplier()
            except Exception as e:
                retryable = is_retryable(e)
                logger.debug(
                    lambda: f"retry-attempt {attempt}/{self.max_attempts} {'retryable' if retryable else 'terminal'}",
                    extra={**(context or {}), "attempt": attempt, "error": str(e) or type(e).__name__},
                )
                if attempt >= self.max_attempts or not retryable:
                    raise
                await self.sleep(self.delay_ms / 1000.0)
