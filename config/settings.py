"""Application settings: file locations and logging."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _path(name: str, default: Path) -> Path:
    value = os.getenv(name, '').strip()
    return Path(value) if value else default


class Settings:
    """
    File locations used by one monitoring run.

    Run parameters (timeouts, retries, concurrency, history length) are not
    here; they live in MonitorConfig and are passed to each component.
    """

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    TARGETS_PATH: Path = _path('TARGETS_PATH', BASE_DIR / 'KVideo-config.json')
    REPORT_PATH:  Path = _path('REPORT_PATH',  BASE_DIR / 'report.md')
    README_PATH:  Path = _path('README_PATH',  BASE_DIR / 'README.md')
    HISTORY_PATH: Path = _path('HISTORY_PATH', BASE_DIR / 'history.json')
    LOG_DIR:      Path = _path('LOG_DIR',      BASE_DIR / 'logs')

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')


settings = Settings()
