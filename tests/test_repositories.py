"""Tests for the JSON target registry and history stores."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftest import FAIL, OK, make_target, snapshots_for
from domain.entities import HistoryWindow
from domain.errors import TargetRegistryError
from infrastructure.repositories import JsonHistoryStore, JsonTargetRegistry, ReportEmbeddedHistoryStore


# ── Target registry ──────────────────────────────────────────────────────────


class TestJsonTargetRegistry:
    def test_loads_in_order_with_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "KVideo-config.json"
        path.write_text(
            json.dumps(
                [
                    {"name": "B站源", "baseUrl": "https://b/api", "id": "b1"},
                    {"name": "A", "baseUrl": "https://a/api", "enabled": False},
                ],
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )
        targets = JsonTargetRegistry(path).load()
        assert [t.name for t in targets] == ["B站源", "A"]
        assert targets[0].reference_id == "b1"
        assert targets[1].reference_id == "-"
        assert targets[1].disabled

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(TargetRegistryError, match="not found"):
            JsonTargetRegistry(tmp_path / "nope.json").load()

    @pytest.mark.parametrize("content", ["{not json", '{"name": "a"}', '[{"name": "a"}]', '["x"]'])
    def test_invalid_content(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "cfg.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(TargetRegistryError):
            JsonTargetRegistry(path).load()


# ── History stores ───────────────────────────────────────────────────────────


def _window(max_days: int = 30) -> HistoryWindow:
    return HistoryWindow(max_days=max_days, snapshots=snapshots_for(make_target(), [OK, FAIL]))


class TestJsonHistoryStore:
    def test_absent_file_gives_empty_window(self, tmp_path: Path) -> None:
        window = JsonHistoryStore(tmp_path / "history.json").load(30)
        assert len(window) == 0
        assert window.max_days == 30

    def test_save_then_load(self, tmp_path: Path) -> None:
        store = JsonHistoryStore(tmp_path / "state" / "history.json")
        store.save(_window())
        raw = json.loads((tmp_path / "state" / "history.json").read_text(encoding="utf-8"))
        assert [d["date"] for d in raw] == ["2026-10-01", "2026-10-02"]
        assert raw[1]["results"][0]["success"] is False
        assert len(store.load(30)) == 2

    def test_load_applies_current_cap(self, tmp_path: Path) -> None:
        store = JsonHistoryStore(tmp_path / "history.json")
        store.save(_window())
        window = store.load(1)
        assert [s.day.isoformat() for s in window] == ["2026-10-02"]

    @pytest.mark.parametrize("content", ["", "[{]", '{"date": 1}'])
    def test_malformed_file_gives_empty_window(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "history.json"
        path.write_text(content, encoding="utf-8")
        assert len(JsonHistoryStore(path).load(30)) == 0

    def test_non_utf8_file_gives_empty_window(self, tmp_path: Path) -> None:
        path = tmp_path / "history.json"
        path.write_bytes(b'[{"date": "2026-10-01", "results": []}]\xff\xfe')
        assert len(JsonHistoryStore(path).load(30)) == 0

    def test_legacy_report_seeds_window(self, tmp_path: Path) -> None:
        report = tmp_path / "report.md"
        report.write_text(
            "# report\n\n<details>\n\n```json\n" + json.dumps(_window().to_list(), indent=2) + "\n```\n</details>\n",
            encoding="utf-8",
        )
        store = JsonHistoryStore(tmp_path / "history.json", legacy=ReportEmbeddedHistoryStore(report))
        assert len(store.load(30)) == 2


class TestReportEmbeddedHistoryStore:
    def test_no_block(self, tmp_path: Path) -> None:
        report = tmp_path / "report.md"
        report.write_text("# nothing here\n", encoding="utf-8")
        assert len(ReportEmbeddedHistoryStore(report).load(30)) == 0

    def test_corrupt_block(self, tmp_path: Path) -> None:
        report = tmp_path / "report.md"
        report.write_text("```json\n[{oops\n```\n", encoding="utf-8")
        assert len(ReportEmbeddedHistoryStore(report).load(30)) == 0

    def test_non_utf8_report(self, tmp_path: Path) -> None:
        report = tmp_path / "report.md"
        report.write_bytes(b"# r\xff\n```json\n[]\n```\n")
        store = ReportEmbeddedHistoryStore(report)
        assert len(store.load(30)) == 0
        store.save(_window())
        assert report.read_bytes() == b"# r\xff\n```json\n[]\n```\n"

    def test_save_rewrites_block(self, tmp_path: Path) -> None:
        report = tmp_path / "report.md"
        report.write_text("head\n```json\n[]\n```\ntail\n", encoding="utf-8")
        store = ReportEmbeddedHistoryStore(report)
        store.save(_window())
        text = report.read_text(encoding="utf-8")
        assert text.startswith("head\n") and text.endswith("tail\n")
        assert len(store.load(30)) == 2
