"""Background scheduling of the daily promotion scan."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler

from ..core.exceptions import ScanInProgressError
from .orchestrator import ScanOrchestrator

logger = logging.getLogger(__name__)

SCAN_JOB_ID = "promotion_scan"


def scheduled_scan(orchestrator: ScanOrchestrator) -> None:
    try:
        orchestrator.run_scan()
    except ScanInProgressError:
        logger.info("Skipping scheduled promotion scan, another scan is running")
    except Exception as e:
        logger.error(f"Promotion scan job failed: {e}", exc_info=True)


def init_scheduled_scan(
    orchestrator: ScanOrchestrator,
    *,
    hour: int = 8,
    minute: int = 0,
    run_on_startup: bool = False,
    scheduler: Optional[BackgroundScheduler] = None,
) -> BackgroundScheduler:
    """Register the daily scan and start the scheduler if needed."""
    scheduler = scheduler or BackgroundScheduler()

    scheduler.add_job(
        func=scheduled_scan,
        args=[orchestrator],
        trigger="cron",
        hour=int(hour),
        minute=int(minute),
        id=SCAN_JOB_ID,
        name="Daily step promotion scan",
        replace_existing=True,
        max_instances=1,
    )
    if run_on_startup:
        scheduler.add_job(
            func=scheduled_scan,
            args=[orchestrator],
            trigger="date",
            run_date=datetime.now() + timedelta(seconds=5),
            id=f"{SCAN_JOB_ID}_startup",
            replace_existing=True,
        )

    if not scheduler.running:
        scheduler.start()
        logger.info("Scheduled tasks initialized. Promotion scan runs daily at %02d:%02d", int(hour), int(minute))
    else:
        logger.info("Scheduler already running")
    return scheduler
