"""Aggregation of the history window into per-target statistics."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence, Tuple

from domain.entities import AggregatedStat, DailySnapshot, HistoryWindow, ProbeOutcome, Target
from domain.enums import HealthStatus, SearchStatus, TrendMark


@dataclass(frozen=True, slots=True)
class AggregationRules:
    warn_streak: int = 3
    trend_days: int = 7

    @classmethod
    def from_config(cls, config) -> "AggregationRules":
        return cls(warn_streak=config.warn_streak, trend_days=config.trend_days)


def _lookup(snapshot: DailySnapshot, target: Target) -> Optional[ProbeOutcome]:
    return snapshot.find(target.endpoint_url)


def count_outcomes(history: Sequence[DailySnapshot], target: Target) -> Tuple[int, int]:
    """(successes, failures) over snapshots that recorded the target."""
    ok = fail = 0
    for snapshot in history:
        outcome = _lookup(snapshot, target)
        if outcome is None:
            continue
        if outcome.reachable:
            ok += 1
        else:
            fail += 1
    return ok, fail


def success_rate(ok: int, fail: int) -> Optional[float]:
    total = ok + fail
    if total == 0:
        return None
    # Halves round up: 1/16 is 6.3.
    rate = (Decimal(ok * 100) / Decimal(total)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return float(rate)


def current_streak(history: Sequence[DailySnapshot], target: Target) -> int:
    """Consecutive most-recent snapshots without a recorded success.

    Days with no outcome for the target count toward the streak; only a
    successful outcome ends it.
    """
    streak = 0
    for snapshot in reversed(history):
        outcome = _lookup(snapshot, target)
        if outcome is not None and outcome.reachable:
            break
        streak += 1
    return streak


def trend(history: Sequence[DailySnapshot], target: Target, days: int = 7) -> str:
    """Oldest-to-newest marks for the last ``days`` snapshots."""
    recent = list(history)[-days:] if days > 0 else []
    marks = []
    for snapshot in recent:
        outcome = _lookup(snapshot, target)
        if outcome is None:
            marks.append(TrendMark.NO_DATA.value)
        elif outcome.reachable:
            marks.append(TrendMark.SUCCESS.value)
        else:
            marks.append(TrendMark.FAILURE.value)
    return "".join(marks)


def classify(target: Target, streak: int, today: Optional[ProbeOutcome], warn_streak: int) -> HealthStatus:
    # Priority order: first match wins.
    if target.disabled:
        return HealthStatus.DISABLED
    if streak >= warn_streak:
        return HealthStatus.WARN_STREAK
    if today is None or not today.reachable:
        return HealthStatus.DOWN
    return HealthStatus.OK


class Aggregator:
    """Folds today's snapshot into the window and derives sorted stats."""

    def __init__(self, rules: AggregationRules | None = None, *, dedupe_same_day: bool = False) -> None:
        self.rules = rules or AggregationRules()
        self.dedupe_same_day = dedupe_same_day

    def fold(self, history: HistoryWindow, today: DailySnapshot) -> HistoryWindow:
        """Append ``today`` to ``history`` in place, enforcing the cap."""
        history.append(today, dedupe_same_day=self.dedupe_same_day)
        return history

    def aggregate(
        self,
        history: HistoryWindow,
        today: DailySnapshot,
        targets: Sequence[Target],
    ) -> List[AggregatedStat]:
        """Stats for every target, most severe first.

        ``today`` is folded into ``history`` first unless it is already the
        latest snapshot. Ties keep registry order.
        """
        if history.latest is not today:
            self.fold(history, today)
        snapshots = list(history)
        recent = history.recent(self.rules.trend_days)
        stats: List[AggregatedStat] = []
        for target in targets:
            ok, fail = count_outcomes(snapshots, target)
            streak = current_streak(snapshots, target)
            latest = today.find(target.endpoint_url)
            stats.append(
                AggregatedStat(
                    target=target,
                    status=classify(target, streak, latest, self.rules.warn_streak),
                    success_count=ok,
                    failure_count=fail,
                    success_rate=success_rate(ok, fail),
                    trend=trend(recent, target, self.rules.trend_days),
                    current_streak=streak,
                    latest_search_status=latest.search_status if latest else SearchStatus.FAILED,
                )
            )
        # list.sort is stable, so equal ranks keep input order.
        stats.sort(key=lambda s: s.status.rank)
        return stats
