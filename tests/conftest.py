from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.lohnmonitor.lohnmonitor.core.enums import AuditAction, NotificationKind
from src.lohnmonitor.lohnmonitor.core.exceptions import DispatchError
from src.lohnmonitor.lohnmonitor.employees.model import Employee
from src.lohnmonitor.lohnmonitor.notifications.model import Notification, NotificationRow
from src.lohnmonitor.lohnmonitor.payroll.model import AllowanceSet

NOW = datetime(2026, 3, 1, 8, 0, 0)


def make_employee(employee_id: int, *, hire_date: date, step: int, **kw) -> Employee:
    data = dict(
        employee_id=employee_id,
        personnel_number=str(1000 + employee_id),
        name=f"Mitarbeiter {employee_id}",
        hire_date=hire_date,
        step=step,
        weekly_hours=40.0,
        hourly_rate=18.50,
        allowances=AllowanceSet(group_allowance_full_time=50, shift_allowance_full_time=75),
        department="Pflege",
        pay_group="E7",
        active=True,
    )
    data.update(kw)
    return Employee(**data)


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def list_active(self):
        return sorted((e for e in self._by_id.values() if e.active), key=lambda e: e.employee_id)

    def count(self, *, active: bool) -> int:
        return sum(1 for e in self._by_id.values() if e.active == active)

    def list_departments(self):
        return sorted({e.department for e in self._by_id.values() if e.active and e.department})


class InMemoryNotifications:
    def __init__(self, employees: Optional[InMemoryEmployees] = None):
        self._employees = employees
        self._rows: dict[int, Notification] = {}
        self._id = 0

    @property
    def all(self) -> list[Notification]:
        return list(self._rows.values())

    def create(
        self,
        *,
        employee_id,
        kind,
        message,
        created_at,
        acknowledged=False,
        acknowledged_at=None,
        acknowledged_by=None,
    ) -> int:
        self._id += 1
        self._rows[self._id] = Notification(
            notification_id=self._id,
            employee_id=int(employee_id),
            kind=kind,
            message=message,
            created_at=created_at,
            acknowledged=acknowledged,
            acknowledged_at=acknowledged_at,
            acknowledged_by=acknowledged_by,
        )
        return self._id

    def get_by_id(self, notification_id):
        return self._rows.get(int(notification_id))

    def find_recent(self, *, employee_id, kind, since):
        items = [
            n
            for n in self._rows.values()
            if n.employee_id == employee_id and n.kind == kind and n.created_at >= since
        ]
        return sorted(items, key=lambda n: n.created_at, reverse=True)

    def find_open(self, *, employee_id, kind):
        items = [n for n in self._rows.values() if n.employee_id == employee_id and n.kind == kind and not n.acknowledged]
        items.sort(key=lambda n: n.created_at, reverse=True)
        return items[0] if items else None

    def acknowledge(self, *, notification_id, acknowledged_by, acknowledged_at) -> bool:
        n = self._rows.get(int(notification_id))
        if not n or n.acknowledged:
            return False
        self._rows[n.notification_id] = replace(
            n, acknowledged=True, acknowledged_by=acknowledged_by, acknowledged_at=acknowledged_at
        )
        return True

    def mark_sent(self, *, notification_id, sent_at) -> bool:
        n = self._rows.get(int(notification_id))
        if not n:
            return False
        self._rows[n.notification_id] = replace(n, sent=True, sent_at=sent_at)
        return True

    def count_unacknowledged(self) -> int:
        return sum(1 for n in self._rows.values() if not n.acknowledged)

    def list_latest(self, *, unacknowledged_only=False, limit=100):
        items = sorted(self._rows.values(), key=lambda n: n.created_at, reverse=True)
        if unacknowledged_only:
            items = [n for n in items if not n.acknowledged]
        out = []
        for n in items[:limit]:
            emp = self._employees.get_by_id(n.employee_id) if self._employees else None
            out.append(
                NotificationRow(
                    notification=n,
                    personnel_number=emp.personnel_number if emp else "",
                    employee_name=emp.name if emp else "",
                    department=emp.department if emp else None,
                )
            )
        return out


class InMemorySettings:
    def __init__(self, values: Optional[dict] = None):
        self.values = dict(values or {})

    def get(self, key):
        return self.values.get(key)

    def get_all(self):
        return dict(self.values)

    def upsert(self, key, value):
        self.values[key] = value


class InMemoryAudit:
    def __init__(self):
        self.entries: list[dict] = []

    def append(self, *, user_id, action: AuditAction, details: dict) -> int:
        self.entries.append({"user_id": user_id, "action": action, "details": details})
        return len(self.entries)


class FakeMailer:
    def __init__(self, *, enabled: bool = True, fail_for=(), crash_for=()):
        self._enabled = enabled
        self._fail_for = set(fail_for)
        self._crash_for = set(crash_for)
        self.sent: list[tuple[int, date]] = []

    @property
    def enabled(self) -> bool:
        return self._enabled

    def send_promotion_alert(self, employee, promotion_date):
        if employee.employee_id in self._fail_for:
            raise DispatchError("SMTP down")
        if employee.employee_id in self._crash_for:
            raise RuntimeError("template exploded")
        self.sent.append((employee.employee_id, promotion_date))


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def promotion_kind() -> NotificationKind:
    return NotificationKind.PROMOTION
