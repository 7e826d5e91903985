"""Run the promotion scan once (same evaluation as the daily job)."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

load_dotenv(override=False)

from config import get_settings_module

from src.lohnmonitor.lohnmonitor.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        db_config=settings.DB_CONFIG,
        smtp_config=getattr(settings, "SMTP_CONFIG", None),
        env_threshold_days=getattr(settings, "ALARM_DAYS_THRESHOLD", None),
    )
    result = container.scan_orchestrator.run_scan()
    print(result.as_dict())


if __name__ == "__main__":
    main()
