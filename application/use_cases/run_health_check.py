"""Use case: one complete monitoring run."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, List, Optional

from config import MonitorConfig
from core.logging import context, get_logger
from domain.entities import DailySnapshot, ProbeOutcome, RunReport, Target
from domain.enums import HealthStatus
from domain.interfaces import IHistoryStore, ITargetRegistry
from application.services.aggregator import AggregationRules, Aggregator
from application.services.probe import Prober
from application.services.scheduler import BoundedScheduler

logger = get_logger(__name__, service="run")

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RunHealthCheckUseCase:
    """
    Target registry → bounded probing → today's snapshot → aggregation.

    The history window is loaded at start, receives exactly one snapshot,
    and is saved back once aggregation is done. Endpoint failures never
    abort the run; only a missing or invalid registry does.
    """

    def __init__(
        self,
        registry: ITargetRegistry,
        history_store: IHistoryStore,
        prober: Prober,
        config: MonitorConfig,
        *,
        clock: Clock = _utc_now,
    ) -> None:
        self.registry = registry
        self.history_store = history_store
        self.prober = prober
        self.config = config
        self.clock = clock
        self.aggregator = Aggregator(
            AggregationRules.from_config(config),
            dedupe_same_day=config.dedupe_same_day,
        )

    @property
    def keyword(self) -> Optional[str]:
        return self.config.search_keyword if self.config.search_enabled else None

    async def probe_target(self, target: Target) -> ProbeOutcome:
        if target.disabled:
            return ProbeOutcome.disabled(target.endpoint_url)
        return await self.prober.probe(target.endpoint_url, self.keyword)

    async def probe_all(self, targets: List[Target]) -> List[ProbeOutcome]:
        """Probe every target, outcome ``i`` matching target ``i``."""
        scheduler: BoundedScheduler[Target, ProbeOutcome] = BoundedScheduler(
            self.config.concurrency,
            on_error=lambda target, _exc: ProbeOutcome(endpoint_url=target.endpoint_url, reachable=False),
        )
        return await scheduler.run_all(targets, self.probe_target)

    async def execute(self) -> RunReport:
        started = self.clock()
        targets = self.registry.load()
        window = self.history_store.load(self.config.max_days)

        with context(run_date=started.date().isoformat(), keyword=self.keyword):
            logger.info(
                lambda: f"run-start targets={len(targets)} history={len(window)}",
                extra={"count": len(targets)},
            )
            outcomes = await self.probe_all(targets)

            today = DailySnapshot(day=started.date(), outcomes=tuple(outcomes))
            self.aggregator.fold(window, today)
            stats = self.aggregator.aggregate(window, today, targets)
            self.history_store.save(window)

            down = sum(1 for s in stats if s.status in (HealthStatus.DOWN, HealthStatus.WARN_STREAK))
            logger.info(lambda: f"run-done down={down} history={len(window)}", extra={"count": len(stats)})

        return RunReport(
            generated_at=started,
            total_targets=len(targets),
            keyword=self.keyword,
            stats=stats,
            history=window,
        )
