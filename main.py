"""Main CLI entry-point: one monitoring run, then exit."""
from __future__ import annotations

import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


def main(argv: list[str] | None = None) -> int:
    bootstrap_logging(
        service="monitor",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="monitor.jsonl",
    )
    try:
        # Lazy import keeps logging configured before module loggers exist.
        from presentation.cli import CheckCommand
        return asyncio.run(CheckCommand(sys.argv[1:] if argv is None else argv).run())
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
