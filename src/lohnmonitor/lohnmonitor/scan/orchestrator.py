"""Daily promotion scan.

Walks all active employees, raises an alert for every promotion due within
the threshold and mails it, unless an open alert from the last seven days
already covers it. A failed mail leaves the alert unsent; the next alert for
that employee is only created once the cooldown has passed.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.enums import NotificationKind
from ..core.exceptions import DispatchError, ScanInProgressError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..mail.service import PromotionMailer
from ..notifications.deduper import NotificationDeduper
from ..notifications.repository import NotificationRepository
from ..settings.service import SettingsService
from ..tariff.promotion import days_remaining, is_promotion_imminent, next_promotion_date

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    evaluated: int = 0
    notified: int = 0
    suppressed: int = 0
    dispatch_failures: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "evaluated": self.evaluated,
            "notified": self.notified,
            "suppressed": self.suppressed,
            "dispatchFailures": self.dispatch_failures,
            "errors": [{"employeeId": eid, "error": msg} for eid, msg in self.errors],
        }


class ScanOrchestrator:
    def __init__(
        self,
        employees: EmployeeRepository,
        notifications: NotificationRepository,
        settings: SettingsService,
        deduper: NotificationDeduper,
        mailer: Optional[PromotionMailer] = None,
    ):
        self._employees = employees
        self._notifications = notifications
        self._settings = settings
        self._deduper = deduper
        self._mailer = mailer
        self._lock = threading.Lock()

    def run_scan(self, *, now: Optional[datetime] = None) -> ScanResult:
        if not self._lock.acquire(blocking=False):
            raise ScanInProgressError("Eine Prüfung läuft bereits")
        try:
            return self._scan(now or now_local())
        finally:
            self._lock.release()

    def _scan(self, now: datetime) -> ScanResult:
        logger.info("Promotion scan started")
        threshold = self._settings.threshold_days()
        result = ScanResult()

        for emp in self._employees.list_active():
            try:
                target = next_promotion_date(emp.hire_date, emp.step)
                if target is None:
                    continue
                result.evaluated += 1
                self._evaluate(emp, target, threshold, now, result)
            except Exception as e:
                logger.exception("Promotion scan failed for employee %s", emp.employee_id)
                result.errors.append((emp.employee_id, str(e)))

        logger.info(
            "Promotion scan done: evaluated=%d notified=%d suppressed=%d dispatch_failures=%d errors=%d",
            result.evaluated,
            result.notified,
            result.suppressed,
            result.dispatch_failures,
            len(result.errors),
        )
        return result

    def _evaluate(self, emp: Employee, target, threshold: int, now: datetime, result: ScanResult) -> None:
        remaining = days_remaining(target, now)
        if not is_promotion_imminent(remaining, threshold):
            return

        kind = NotificationKind.PROMOTION
        recent = self._deduper.recent_for(emp.employee_id, kind, now=now)
        if not self._deduper.should_notify(emp.employee_id, kind, recent, now=now):
            result.suppressed += 1
            return

        message = f"Stufenaufstieg in {remaining} Tagen: {emp.name} -> Stufe {emp.step + 1}"
        notification = self._deduper.record_notification(emp.employee_id, kind, message, now=now)
        result.notified += 1
        logger.info("Alarm: %s (PN %s) - Aufstieg in %d Tagen", emp.name, emp.personnel_number, remaining)

        if self._mailer is None or not self._mailer.enabled:
            return
        try:
            self._mailer.send_promotion_alert(emp, target)
        except DispatchError as e:
            result.dispatch_failures += 1
            logger.warning("Mail for employee %s not sent: %s", emp.employee_id, e)
            return
        self._notifications.mark_sent(notification_id=notification.notification_id, sent_at=now)
