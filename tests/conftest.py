from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

from domain.entities import DailySnapshot, HistoryWindow, ProbeOutcome, Target
from domain.enums import SearchStatus
from domain.interfaces import IHistoryStore, ITargetRegistry

BASE_DAY = date(2026, 10, 1)

# Per-day outcome for one target in scenario helpers.
OK, FAIL, MISSING = "ok", "fail", "missing"


def make_target(name: str = "a", *, disabled: bool = False) -> Target:
    return Target(name=name, endpoint_url=f"https://{name}.example/api", reference_id=f"id-{name}", disabled=disabled)


def snapshots_for(target: Target, pattern: List[str], *, start: date = BASE_DAY) -> List[DailySnapshot]:
    """One snapshot per entry of ``pattern``, oldest first."""
    out = []
    for offset, mark in enumerate(pattern):
        outcomes = ()
        if mark != MISSING:
            outcomes = (ProbeOutcome(target.endpoint_url, mark == OK, SearchStatus.NOT_TESTED),)
        out.append(DailySnapshot(day=start + timedelta(days=offset), outcomes=outcomes))
    return out


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def sleeper() -> RecordingSleep:
    return RecordingSleep()


class StaticRegistry(ITargetRegistry):
    def __init__(self, targets: List[Target]) -> None:
        self.targets = targets

    def load(self) -> List[Target]:
        return list(self.targets)


class MemoryHistoryStore(IHistoryStore):
    def __init__(self, snapshots: Optional[List[DailySnapshot]] = None) -> None:
        self.snapshots = list(snapshots or [])
        self.saved: Optional[HistoryWindow] = None

    def load(self, max_days: int) -> HistoryWindow:
        return HistoryWindow(max_days=max_days, snapshots=list(self.snapshots))

    def save(self, window: HistoryWindow) -> None:
        self.saved = window


Handler = Callable[[httpx.Request], httpx.Response]


class FakeEndpoints:
    """MockTransport handler with per-host scripted responses and a call log."""

    def __init__(self) -> None:
        self.routes: Dict[str, Handler] = {}
        self.calls: List[httpx.Request] = []

    def route(self, host: str, handler: Handler) -> None:
        self.routes[host] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        handler = self.routes.get(request.url.host)
        if handler is None:
            raise httpx.ConnectError("no route", request=request)
        return handler(request)

    def calls_to(self, host: str) -> List[httpx.Request]:
        return [r for r in self.calls if r.url.host == host]


@pytest.fixture
def endpoints() -> FakeEndpoints:
    return FakeEndpoints()


@pytest_asyncio.fixture
async def client(endpoints: FakeEndpoints):
    async with httpx.AsyncClient(transport=httpx.MockTransport(endpoints)) as c:
        yield c
