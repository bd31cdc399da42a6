"""Bounded-concurrency scheduler preserving input order."""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Generic, List, Optional, Sequence, Set, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Worker = Callable[[T], Awaitable[R]]
ErrorHandler = Callable[[T, BaseException], R]


class BoundedScheduler(Generic[T, R]):
    """
    Runs one worker call per item with at most ``limit`` in flight.

    Admission is a sliding window: items are started in input order, and
    once ``limit`` tasks are running the next one waits for *any* task to
    finish (not necessarily the oldest). ``run_all`` returns only after
    every task has completed; result ``i`` always belongs to item ``i``.
    """

    def __init__(self, limit: int, *, on_error: Optional[ErrorHandler] = None) -> None:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self.limit = limit
        self.on_error = on_error
        self.peak_in_flight = 0

    async def run_all(self, items: Sequence[T], worker: Worker) -> List[R]:
        results: List[Optional[R]] = [None] * len(items)
        errors: List[BaseException] = []
        executing: Set[asyncio.Task] = set()

        async def _run(index: int, item: T) -> None:
            # Each task owns exactly one slot of ``results``.
            try:
                results[index] = await worker(item)
            except Exception as e:
                if self.on_error is None:
                    errors.append(e)
                    return
                logger.error(f"worker failed for item {index}: {e!r}")
                results[index] = self.on_error(item, e)

        for index, item in enumerate(items):
            executing.add(asyncio.create_task(_run(index, item)))
            self.peak_in_flight = max(self.peak_in_flight, len(executing))
            if len(executing) >= self.limit:
                _done, pending = await asyncio.wait(executing, return_when=asyncio.FIRST_COMPLETED)
                executing = set(pending)

        if executing:
            await asyncio.wait(executing)

        if errors:
            raise errors[0]
        return results  # type: ignore[return-value]
