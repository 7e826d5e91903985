from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import NOTIFICATION_LIST_LIMIT
from ..core.enums import AlarmLevel, NotificationKind, Role
from ..core.exceptions import ConfigurationError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..notifications.deduper import NotificationDeduper
from ..notifications.repository import NotificationRepository
from ..payroll.service import SalaryService
from ..settings.service import SettingsService
from ..tariff.model import PromotionStatus
from ..tariff.status import evaluate_employee

logger = logging.getLogger(__name__)


def display_name(employee_name: str, personnel_number: str, role: Role) -> str:
    """Viewers only ever see the personnel number."""
    if role == Role.VIEWER:
        return f"🔒 PN: {personnel_number}"
    return employee_name


def _iso(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


class DashboardService:
    def __init__(
        self,
        employees: EmployeeRepository,
        notifications: NotificationRepository,
        settings: SettingsService,
        deduper: NotificationDeduper,
        salaries: SalaryService,
    ):
        self._employees = employees
        self._notifications = notifications
        self._settings = settings
        self._deduper = deduper
        self._salaries = salaries

    def summary(self, *, now: Optional[datetime] = None) -> dict:
        now = now or now_local()
        threshold = self._settings.threshold_days()

        alarms = 0
        for emp in self._employees.list_active():
            if evaluate_employee(emp, threshold, now).alarm:
                alarms += 1

        return {
            "totalEmployees": self._employees.count(active=True),
            "inactiveEmployees": self._employees.count(active=False),
            "alarmsCount": alarms,
            "unacknowledgedNotifications": self._notifications.count_unacknowledged(),
            "departmentsCount": len(self._employees.list_departments()),
            "schwellenwertTage": threshold,
        }

    def alarms(self, *, role: Role, now: Optional[datetime] = None) -> dict:
        """Red and yellow rows, soonest promotion first."""
        now = now or now_local()
        threshold = self._settings.threshold_days()
        try:
            reference = self._settings.reference_weekly_hours()
            salary_error = None
        except ConfigurationError as e:
            logger.warning("Alarm list without salaries: %s", e)
            reference = None
            salary_error = str(e)

        rows: list[tuple[Employee, PromotionStatus]] = []
        for emp in self._employees.list_active():
            status = evaluate_employee(emp, threshold, now)
            if status.next_promotion_date is None or status.alarm_level == AlarmLevel.GREEN:
                continue
            rows.append((emp, status))
        rows.sort(key=lambda r: r[1].next_promotion_date)

        alarms = []
        for emp, status in rows:
            handled = self._deduper.recently_acknowledged(emp.employee_id, NotificationKind.PROMOTION, now=now)
            salary = self._salary_for(emp, reference)
            alarms.append(
                {
                    "id": emp.employee_id,
                    "personalnummer": emp.personnel_number,
                    "name": display_name(emp.name, emp.personnel_number, role),
                    "abteilung": emp.department,
                    "aktuelleStufe": emp.step,
                    "naechsteStufe": emp.step + 1,
                    "naechsterAufstieg": _iso(status.next_promotion_date),
                    "tageBisAufstieg": status.days_remaining,
                    "alarmLevel": status.alarm_level.value,
                    "istUeberfaellig": status.days_remaining is not None and status.days_remaining < 0,
                    "istBestaetigt": handled is not None,
                    "bestaetigtAm": _iso(handled.acknowledged_at) if handled else None,
                    "bestaetigtVon": handled.acknowledged_by if handled else None,
                    "gehalt": salary,
                }
            )

        return {"alarms": alarms, "schwellenwertTage": threshold, "gehaltError": salary_error}

    def _salary_for(self, emp: Employee, reference: Optional[float]) -> Optional[dict]:
        if reference is None:
            return None
        try:
            return self._salaries.compute_for(emp, reference_weekly_hours=reference).as_dict()
        except ValidationError as e:
            logger.warning("No salary for employee %s: %s", emp.employee_id, e)
            return None

    def notifications(self, *, role: Role, unacknowledged_only: bool = False) -> list[dict]:
        out = []
        for row in self._notifications.list_latest(
            unacknowledged_only=unacknowledged_only, limit=NOTIFICATION_LIST_LIMIT
        ):
            n = row.notification
            out.append(
                {
                    "id": n.notification_id,
                    "employeeId": n.employee_id,
                    "type": n.kind.value,
                    "message": n.message,
                    "createdAt": _iso(n.created_at),
                    "acknowledged": n.acknowledged,
                    "acknowledgedAt": _iso(n.acknowledged_at),
                    "acknowledgedBy": n.acknowledged_by,
                    "sent": n.sent,
                    "sentAt": _iso(n.sent_at),
                    "employee": {
                        "personalnummer": row.personnel_number,
                        "name": display_name(row.employee_name, row.personnel_number, role),
                        "abteilung": row.department,
                    },
                }
            )
        return out
