"""Tests for domain entities: targets, outcomes and the history window."""

from __future__ import annotations

from datetime import date

import pytest

from conftest import BASE_DAY, FAIL, OK, make_target, snapshots_for
from domain.entities import DailySnapshot, HistoryWindow, ProbeOutcome, Target
from domain.enums import HealthStatus, SearchStatus
from domain.errors import HistoryDecodeError


# ── Target ───────────────────────────────────────────────────────────────────


class TestTarget:
    def test_defaults_from_registry_entry(self) -> None:
        t = Target.from_config({"name": "Src", "baseUrl": " https://x/api "})
        assert t.endpoint_url == "https://x/api"
        assert t.reference_id == "-"
        assert t.disabled is False

    def test_only_explicit_false_disables(self) -> None:
        assert Target.from_config({"name": "a", "baseUrl": "u", "enabled": False}).disabled
        assert not Target.from_config({"name": "a", "baseUrl": "u", "enabled": None}).disabled
        assert not Target.from_config({"name": "a", "baseUrl": "u", "enabled": 0}).disabled

    def test_id_is_kept_as_string(self) -> None:
        assert Target.from_config({"name": "a", "baseUrl": "u", "id": 42}).reference_id == "42"

    @pytest.mark.parametrize("raw", [{"baseUrl": "u"}, {"name": "a"}, {"name": "", "baseUrl": "u"}])
    def test_missing_fields_rejected(self, raw) -> None:
        with pytest.raises(ValueError):
            Target.from_config(raw)


# ── Outcomes and snapshots ───────────────────────────────────────────────────


class TestProbeOutcome:
    def test_wire_format(self) -> None:
        o = ProbeOutcome("https://a", True, SearchStatus.NO_RESULTS)
        assert o.to_dict() == {"api": "https://a", "success": True, "searchStatus": "无结果"}

    def test_disabled_factory(self) -> None:
        o = ProbeOutcome.disabled("https://a")
        assert not o.reachable
        assert o.search_status is SearchStatus.DISABLED

    def test_unknown_search_status_decodes_as_failed(self) -> None:
        o = ProbeOutcome.from_dict({"api": "https://a", "success": False, "searchStatus": "???"})
        assert o is not None and o.search_status is SearchStatus.FAILED

    @pytest.mark.parametrize("flag", ["false", "true", 1, None])
    def test_only_boolean_true_is_reachable(self, flag) -> None:
        o = ProbeOutcome.from_dict({"api": "u", "success": flag})
        assert o is not None and o.reachable is False

    @pytest.mark.parametrize("raw", [None, [], {"success": True}, {"api": ""}])
    def test_unusable_entries(self, raw) -> None:
        assert ProbeOutcome.from_dict(raw) is None


class TestDailySnapshot:
    def test_find_returns_first_match(self) -> None:
        snap = DailySnapshot(
            day=BASE_DAY,
            outcomes=(ProbeOutcome("u", True), ProbeOutcome("u", False)),
        )
        assert snap.find("u").reachable is True
        assert snap.find("other") is None

    def test_from_dict_skips_bad_results(self) -> None:
        snap = DailySnapshot.from_dict({"date": "2026-10-02", "results": [{"api": "u", "success": 1}, "junk"]})
        assert snap.day == date(2026, 10, 2)
        assert len(snap.outcomes) == 1

    def test_bad_date_rejected(self) -> None:
        assert DailySnapshot.from_dict({"date": "yesterday", "results": []}) is None


# ── HistoryWindow ────────────────────────────────────────────────────────────


class TestHistoryWindow:
    def test_fifo_eviction_at_cap(self) -> None:
        t = make_target()
        snaps = snapshots_for(t, [OK, FAIL, OK, FAIL])
        window = HistoryWindow(max_days=3, snapshots=snaps[:3])
        window.append(snaps[3])
        assert len(window) == 3
        assert [s.day for s in window] == [s.day for s in snaps[1:]]

    def test_below_cap_keeps_everything(self) -> None:
        t = make_target()
        snaps = snapshots_for(t, [OK, FAIL])
        window = HistoryWindow(max_days=5, snapshots=snaps[:1])
        window.append(snaps[1])
        assert len(window) == 2

    def test_oversized_input_is_trimmed_to_newest(self) -> None:
        t = make_target()
        snaps = snapshots_for(t, [OK] * 6)
        window = HistoryWindow(max_days=4, snapshots=list(snaps))
        assert [s.day for s in window] == [s.day for s in snaps[2:]]

    def test_same_day_appends_by_default(self) -> None:
        window = HistoryWindow(max_days=5)
        window.append(DailySnapshot(day=BASE_DAY))
        window.append(DailySnapshot(day=BASE_DAY))
        assert len(window) == 2

    def test_same_day_dedupe_replaces(self) -> None:
        window = HistoryWindow(max_days=5)
        window.append(DailySnapshot(day=BASE_DAY, outcomes=(ProbeOutcome("u", False),)))
        window.append(DailySnapshot(day=BASE_DAY, outcomes=(ProbeOutcome("u", True),)), dedupe_same_day=True)
        assert len(window) == 1
        assert window.latest.find("u").reachable

    def test_recent(self) -> None:
        snaps = snapshots_for(make_target(), [OK, OK, FAIL])
        window = HistoryWindow(max_days=5, snapshots=snaps)
        assert window.recent(2) == snaps[1:]
        assert window.recent(0) == []

    def test_from_list_rejects_non_list(self) -> None:
        with pytest.raises(HistoryDecodeError):
            HistoryWindow.from_list({"date": "2026-10-01"}, max_days=5)

    def test_serialization_shape(self) -> None:
        t = make_target()
        window = HistoryWindow(max_days=5, snapshots=snapshots_for(t, [OK]))
        assert window.to_list() == [
            {"date": "2026-10-01", "results": [{"api": t.endpoint_url, "success": True, "searchStatus": "-"}]}
        ]

    def test_invalid_cap(self) -> None:
        with pytest.raises(ValueError):
            HistoryWindow(max_days=0)


def test_health_status_rank_order() -> None:
    ranked = sorted(HealthStatus, key=lambda s: s.rank)
    assert ranked == [HealthStatus.WARN_STREAK, HealthStatus.DOWN, HealthStatus.OK, HealthStatus.DISABLED]
