from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, Optional

import httpx

from config import MonitorConfig, settings
from core.logging.logger import StructuredLogger, get_logger
from domain.errors import TargetRegistryError
from application.services.probe import Prober, RetryPolicy
from application.use_cases import RunHealthCheckUseCase
from infrastructure.repositories import JsonHistoryStore, JsonTargetRegistry, ReportEmbeddedHistoryStore
from infrastructure.rendering import MarkdownReportRenderer, ReportPublisher


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="source-monitor",
        description="Probe video-source APIs and update the health report.",
    )
    parser.add_argument("keyword", nargs="?", default=None, help="search keyword for the capability check")
    parser.add_argument("--no-search", action="store_true", help="skip the search capability check")
    parser.add_argument("--concurrency", type=int, default=None, help="max probes in flight")
    parser.add_argument("--max-days", type=int, default=None, help="history window length")
    parser.add_argument("--timeout-ms", type=int, default=None, help="per-request timeout")
    parser.add_argument("--targets", type=Path, default=None, help="target config JSON")
    parser.add_argument("--report", type=Path, default=None, help="markdown report output")
    parser.add_argument("--readme", type=Path, default=None, help="README to sync between status markers")
    parser.add_argument("--history", type=Path, default=None, help="history JSON file")
    parser.add_argument("--json", dest="json_out", action="store_true", help="print the run report as JSON")
    return parser


class CheckCommand:
    """One non-interactive monitoring run, driven by argv and environment."""

    def __init__(self, argv: Optional[Iterable[str]] = None, *, config: Optional[MonitorConfig] = None) -> None:
        self.logger: StructuredLogger = get_logger(__name__, service="cli")
        self.args = build_parser().parse_args(list(argv or []))
        base = config or MonitorConfig.from_env()
        self.config = base.with_overrides(
            search_keyword=self.args.keyword,
            search_enabled=False if self.args.no_search else None,
            concurrency=self.args.concurrency,
            max_days=self.args.max_days,
            timeout_ms=self.args.timeout_ms,
        )
        self.targets_path: Path = self.args.targets or settings.TARGETS_PATH
        self.report_path: Path = self.args.report or settings.REPORT_PATH
        self.readme_path: Path = self.args.readme or settings.README_PATH
        self.history_path: Path = self.args.history or settings.HISTORY_PATH

    def _use_case(self, client: httpx.AsyncClient) -> RunHealthCheckUseCase:
        prober = Prober(
            client,
            RetryPolicy.from_config(self.config),
            timeout_ms=self.config.timeout_ms,
        )
        history = JsonHistoryStore(
            self.history_path,
            legacy=ReportEmbeddedHistoryStore(self.report_path),
        )
        return RunHealthCheckUseCase(
            JsonTargetRegistry(self.targets_path),
            history,
            prober,
            self.config,
        )

    async def run(self) -> int:
        try:
            self.config.validate()
        except ValueError as e:
            print(f"Invalid configuration: {e}", file=sys.stderr)
            return 2

        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                report = await self._use_case(client).execute()
        except TargetRegistryError as e:
            self.logger.critical(lambda: f"registry-failed: {e}")
            print(f"❌ {e}", file=sys.stderr)
            return 1

        renderer = MarkdownReportRenderer(utc_offset_hours=self.config.report_utc_offset_hours)
        ReportPublisher(renderer, self.report_path, self.readme_path).publish(report)

        if self.args.json_out:
            print(json.dumps(report.to_dict(), ensure_ascii=False, separators=(",", ":")))
        else:
            print(f"📄 Report written: {self.report_path}")
        return 0

