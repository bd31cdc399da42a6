from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any

DEFAULT_KEYWORD = "斗罗大陆"


def _int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True, slots=True)
class MonitorConfig:
    """Run parameters for probing and aggregation, with env overrides."""
    max_days: int = 30
    warn_streak: int = 3
    timeout_ms: int = 10_000
    concurrency: int = 10
    max_retry: int = 3
    retry_delay_ms: int = 500
    search_enabled: bool = True
    search_keyword: str = DEFAULT_KEYWORD
    trend_days: int = 7
    dedupe_same_day: bool = False
    report_utc_offset_hours: int = 8

    @classmethod
    def from_env(cls) -> "MonitorConfig":
        """Build MonitorConfig from MONITOR_* environment variables."""
        return cls(
            max_days=_int("MONITOR_MAX_DAYS", 30),
            warn_streak=_int("MONITOR_WARN_STREAK", 3),
            timeout_ms=_int("MONITOR_TIMEOUT_MS", 10_000),
            concurrency=_int("MONITOR_CONCURRENCY", 10),
            max_retry=_int("MONITOR_MAX_RETRY", 3),
            retry_delay_ms=_int("MONITOR_RETRY_DELAY_MS", 500),
            search_enabled=_bool("MONITOR_SEARCH_ENABLED", True),
            search_keyword=os.getenv("MONITOR_SEARCH_KEYWORD", "").strip() or DEFAULT_KEYWORD,
            trend_days=_int("MONITOR_TREND_DAYS", 7),
            dedupe_same_day=_bool("MONITOR_DEDUPE_SAME_DAY", False),
            report_utc_offset_hours=_int("MONITOR_REPORT_UTC_OFFSET_HOURS", 8),
        )

    def with_overrides(self, **values: Any) -> "MonitorConfig":
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})

    def validate(self) -> None:
        for name in ("max_days", "warn_streak", "timeout_ms", "concurrency", "max_retry", "trend_days"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1")
        if self.retry_delay_ms < 0:
            raise ValueError("retry_delay_ms must be >= 0")
        if self.search_enabled and not self.search_keyword:
            raise ValueError("search_keyword must be set when search is enabled")
