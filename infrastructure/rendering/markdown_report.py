"""Markdown rendering of a run report and README synchronization."""
from __future__ import annotations

import json
import logging
import re
from datetime import timedelta, timezone
from pathlib import Path

from domain.entities import AggregatedStat, RunReport
from domain.interfaces import IReportRenderer

logger = logging.getLogger(__name__)

README_START = "<!-- API_STATUS_START -->"
README_END = "<!-- API_STATUS_END -->"
DETAILS_OPEN = "<details>"

_HEADER = "| 状态 | 资源名称 | ID/备注 | API接口 | 搜索功能 | 成功 | 失败 | 成功率 | 最近7天趋势 |\n"
_DIVIDER = "|------|---------|---------|---------|---------|-----:|-----:|-------:|--------------|\n"


def _cell(value: object) -> str:
    return str(value).replace("|", "\\|").replace("\n", " ")


class MarkdownReportRenderer(IReportRenderer):
    """Renders the status table followed by a collapsible history block."""

    def __init__(self, *, utc_offset_hours: int = 8) -> None:
        self.utc_offset_hours = utc_offset_hours

    def format_timestamp(self, report: RunReport) -> str:
        ts = report.generated_at
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        local = ts.astimezone(timezone(timedelta(hours=self.utc_offset_hours)))
        label = "CST" if self.utc_offset_hours == 8 else f"UTC{self.utc_offset_hours:+d}"
        return f"{local.strftime('%Y-%m-%d %H:%M')} {label}"

    def render_row(self, stat: AggregatedStat) -> str:
        t = stat.target
        cells = [
            stat.status.mark,
            _cell(t.name),
            _cell(t.reference_id),
            f"[Link]({t.endpoint_url})",
            stat.latest_search_status.value,
            str(stat.success_count),
            str(stat.failure_count),
            stat.success_rate_label,
            stat.trend,
        ]
        return "| " + " | ".join(cells) + " |\n"

    def render_table(self, report: RunReport) -> str:
        md = f"# 源接口健康检测报告\n\n最近更新时间：{self.format_timestamp(report)}\n\n"
        md += f"**总源数:** {report.total_targets} | **检测关键词:** {report.keyword or '-'}\n\n"
        md += _HEADER + _DIVIDER
        for stat in report.stats:
            md += self.render_row(stat)
        return md

    def render(self, report: RunReport) -> str:
        md = self.render_table(report)
        md += f"\n{DETAILS_OPEN}\n<summary>📜 点击展开查看历史检测数据 (JSON)</summary>\n\n"
        md += "```json\n" + json.dumps(report.history.to_list(), ensure_ascii=False, indent=2) + "\n```\n"
        md += "</details>\n"
        return md


def sync_readme(readme_path: Path, report_markdown: str) -> bool:
    """Replace the marked README section with the table part of the report.

    Returns False when the README or its markers are absent.
    """
    if not readme_path.exists():
        return False
    readme = readme_path.read_text(encoding="utf-8")
    pattern = re.compile(re.escape(README_START) + r"[\s\S]*" + re.escape(README_END))
    if not pattern.search(readme):
        logger.info(f"README {readme_path} has no status markers; skipped")
        return False
    table_only = report_markdown.split(DETAILS_OPEN)[0]
    replacement = f"{README_START}\n\n{table_only}\n{README_END}"
    readme_path.write_text(pattern.sub(lambda _m: replacement, readme, count=1), encoding="utf-8")
    return True


class ReportPublisher:
    """Writes the rendered report and keeps the README section in sync."""

    def __init__(self, renderer: IReportRenderer, report_path: Path, readme_path: Path | None = None) -> None:
        self.renderer = renderer
        self.report_path = Path(report_path)
        self.readme_path = Path(readme_path) if readme_path else None

    def publish(self, report: RunReport) -> str:
        md = self.renderer.render(report)
        self.report_path.parent.mkdir(parents=True, exist_ok=True)
        self.report_path.write_text(md, encoding="utf-8")
        logger.info(f"Report written to {self.report_path}")
        if self.readme_path is not None and sync_readme(self.readme_path, md):
            logger.info(f"README synced: {self.readme_path}")
        return md
