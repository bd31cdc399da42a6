"""History stores: standalone JSON file and the block embedded in a report."""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Optional

from domain.entities import HistoryWindow
from domain.errors import HistoryDecodeError
from domain.interfaces import IHistoryStore

logger = logging.getLogger(__name__)

EMBEDDED_BLOCK = re.compile(r"```json\n([\s\S]+?)\n```")


def decode_history(text: str, *, max_days: int) -> HistoryWindow:
    """Parse serialized history; raises HistoryDecodeError on bad input."""
    try:
        raw: Any = json.loads(text)
    except ValueError as e:
        raise HistoryDecodeError(f"history is not valid JSON: {e}") from e
    return HistoryWindow.from_list(raw, max_days=max_days)


def read_history_text(path: Path) -> str:
    """Read a history-bearing file; unreadable or non-UTF-8 content is a decode error."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, ValueError) as e:
        raise HistoryDecodeError(f"cannot read {path}: {e}") from e


def encode_history(window: HistoryWindow) -> str:
    return json.dumps(window.to_list(), ensure_ascii=False, indent=2)


def _write_atomic(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(f"{path.name}.tmp")
    tmp.write_text(text, encoding="utf-8")
    tmp.replace(path)


class ReportEmbeddedHistoryStore(IHistoryStore):
    """History kept in the fenced ```json block of a rendered report."""

    def __init__(self, report_path: Path):
        self.report_path = Path(report_path)

    def load(self, max_days: int) -> HistoryWindow:
        if not self.report_path.exists():
            return HistoryWindow(max_days=max_days)
        try:
            match = EMBEDDED_BLOCK.search(read_history_text(self.report_path))
            if not match:
                return HistoryWindow(max_days=max_days)
            return decode_history(match.group(1), max_days=max_days)
        except HistoryDecodeError as e:
            logger.warning(f"history-decode-failed in {self.report_path}: {e}; starting empty")
            return HistoryWindow(max_days=max_days)

    def save(self, window: HistoryWindow) -> None:
        """Replace the embedded block of an existing report."""
        if not self.report_path.exists():
            logger.debug(f"No report at {self.report_path}; embedded history written by renderer")
            return
        try:
            old = read_history_text(self.report_path)
        except HistoryDecodeError as e:
            logger.warning(f"Report {self.report_path} unreadable, embedded history not updated: {e}")
            return
        block = "```json\n" + encode_history(window) + "\n```"
        new, count = EMBEDDED_BLOCK.subn(lambda _m: block, old, count=1)
        if count:
            _write_atomic(self.report_path, new)


class JsonHistoryStore(IHistoryStore):
    """
    History kept in its own JSON file.

    When the file does not exist yet, ``legacy`` (typically the report
    embedded store) seeds the window once.
    """

    def __init__(self, path: Path, *, legacy: Optional[IHistoryStore] = None):
        self.path = Path(path)
        self.legacy = legacy

    def load(self, max_days: int) -> HistoryWindow:
        if not self.path.exists():
            if self.legacy is not None:
                window = self.legacy.load(max_days)
                if len(window):
                    logger.info(f"Migrating {len(window)} snapshots from legacy history")
                return window
            return HistoryWindow(max_days=max_days)
        try:
            return decode_history(read_history_text(self.path), max_days=max_days)
        except HistoryDecodeError as e:
            logger.warning(f"history-decode-failed in {self.path}: {e}; starting empty")
            return HistoryWindow(max_days=max_days)

    def save(self, window: HistoryWindow) -> None:
        _write_atomic(self.path, encode_history(window) + "\n")
        logger.debug(f"Saved {len(window)} snapshots to {self.path}")
