from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest
from flask import Flask
from werkzeug.security import generate_password_hash

from src.lohnmonitor.lohnmonitor.core.enums import Role
from src.lohnmonitor.lohnmonitor.dashboard import controller as dashboard_controller
from src.lohnmonitor.lohnmonitor.dashboard.service import DashboardService
from src.lohnmonitor.lohnmonitor.employees import controller as employees_controller
from src.lohnmonitor.lohnmonitor.notifications.deduper import NotificationDeduper
from src.lohnmonitor.lohnmonitor.notifications.service import NotificationService
from src.lohnmonitor.lohnmonitor.payroll.service import SalaryService
from src.lohnmonitor.lohnmonitor.scan import controller as scan_controller
from src.lohnmonitor.lohnmonitor.scan.orchestrator import ScanOrchestrator
from src.lohnmonitor.lohnmonitor.settings import controller as settings_controller
from src.lohnmonitor.lohnmonitor.settings.service import SettingsService
from src.lohnmonitor.lohnmonitor.users import controller as users_controller
from src.lohnmonitor.lohnmonitor.users.model import User
from src.lohnmonitor.lohnmonitor.users.service import AuthService

from conftest import FakeMailer, InMemoryAudit, InMemoryEmployees, InMemoryNotifications, InMemorySettings, make_employee


class InMemoryUsers:
    def __init__(self, users):
        self._by_name = {u.username: u for u in users}

    def get_by_username(self, username):
        return self._by_name.get(username)


@pytest.fixture
def container():
    employees = InMemoryEmployees(
        [
            make_employee(1, hire_date=date(2023, 3, 15), step=2),
            make_employee(2, hire_date=date(1990, 1, 1), step=6),
        ]
    )
    notifications = InMemoryNotifications(employees)
    audit = InMemoryAudit()
    settings = SettingsService(InMemorySettings({"alarm_days_threshold": "40"}), audit=audit)
    deduper = NotificationDeduper(notifications)
    salaries = SalaryService(employees, settings)
    users = InMemoryUsers(
        [User(user_id=1, username="admin", password_hash=generate_password_hash("admin123"), role=Role.ADMIN)]
    )
    return SimpleNamespace(
        employees_repo=employees,
        notifications_repo=notifications,
        audit_repo=audit,
        email_service=FakeMailer(enabled=False),
        auth_service=AuthService(users),
        settings_service=settings,
        salary_service=salaries,
        notification_service=NotificationService(notifications, employees),
        dashboard_service=DashboardService(employees, notifications, settings, deduper, salaries),
        scan_orchestrator=ScanOrchestrator(employees, notifications, settings, deduper),
    )


@pytest.fixture
def client(container):
    app = Flask(__name__)
    app.config.update(TESTING=True, SECRET_KEY="test")
    for module in (users_controller, dashboard_controller, employees_controller, scan_controller, settings_controller):
        module.register(app, container)
    return app.test_client()


def _login_as(client, role: Role, username="tester"):
    with client.session_transaction() as sess:
        sess["user_id"] = 99
        sess["username"] = username
        sess["role"] = role.value


def test_login_and_me(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    assert resp.get_json()["user"]["role"] == "Admin"

    me = client.get("/api/auth/me")
    assert me.get_json()["user"]["username"] == "admin"

    client.post("/api/auth/logout")
    assert client.get("/api/auth/me").status_code == 401


def test_login_with_wrong_password(client):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})
    assert resp.status_code == 401


def test_dashboard_requires_login(client):
    assert client.get("/api/dashboard/summary").status_code == 401


def test_summary(client):
    _login_as(client, Role.VIEWER)
    resp = client.get("/api/dashboard/summary")
    assert resp.status_code == 200
    assert resp.get_json()["summary"]["totalEmployees"] == 2


def test_viewer_cannot_acknowledge(client):
    _login_as(client, Role.VIEWER)
    assert client.post("/api/dashboard/alarms/1/acknowledge").status_code == 403


def test_editor_acknowledges_alarm(client, container):
    _login_as(client, Role.EDITOR, username="editor")
    resp = client.post("/api/dashboard/alarms/1/acknowledge")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["notification"]["acknowledged"] is True
    assert body["notification"]["acknowledgedBy"] == "editor"
    assert len(container.notifications_repo.all) == 1


def test_acknowledge_unknown_employee(client):
    _login_as(client, Role.ADMIN)
    assert client.post("/api/dashboard/alarms/404/acknowledge").status_code == 404


def test_employee_salary(client):
    _login_as(client, Role.VIEWER)
    resp = client.get("/api/employees/1/salary")
    assert resp.status_code == 200
    assert resp.get_json()["gehalt"]["gesamtBrutto"] == 3342.52

    assert client.get("/api/employees/404/salary").status_code == 404


def test_employee_promotion_for_special_step(client):
    _login_as(client, Role.VIEWER)
    body = client.get("/api/employees/2/promotion").get_json()
    assert body["stufeLabel"] == "Stufe 6 (Sonderstufe)"
    assert body["naechsterAufstieg"] is None
    assert body["alarmLevel"] == "gruen"


def test_scan_is_admin_only(client):
    _login_as(client, Role.EDITOR)
    assert client.post("/api/admin/scan").status_code == 403


def test_manual_scan(client):
    _login_as(client, Role.ADMIN)
    resp = client.post("/api/admin/scan")
    assert resp.status_code == 200
    assert resp.get_json()["result"]["evaluated"] == 1


def test_manual_scan_while_running(client, container):
    _login_as(client, Role.ADMIN)
    container.scan_orchestrator._lock.acquire()
    try:
        resp = client.post("/api/admin/scan")
    finally:
        container.scan_orchestrator._lock.release()
    assert resp.status_code == 409


def test_manual_scan_is_audited(client, container):
    _login_as(client, Role.ADMIN)
    client.post("/api/admin/scan")
    (entry,) = container.audit_repo.entries
    assert entry["action"].value == "SCAN_TRIGGERED"
    assert entry["user_id"] == 99


def test_settings_are_admin_only(client):
    _login_as(client, Role.EDITOR)
    assert client.get("/api/admin/settings").status_code == 403
    assert client.put("/api/admin/settings", json={"settings": {"alarm_days_threshold": 30}}).status_code == 403


def test_admin_updates_settings(client, container):
    _login_as(client, Role.ADMIN, username="admin")

    resp = client.put("/api/admin/settings", json={"settings": {"alarm_days_threshold": 30}})

    assert resp.status_code == 200
    assert client.get("/api/admin/settings").get_json()["settings"] == {"alarm_days_threshold": "30"}
    assert container.settings_service.threshold_days() == 30
    (entry,) = container.audit_repo.entries
    assert entry["action"].value == "SETTINGS_UPDATED"


def test_invalid_settings_are_rejected(client):
    _login_as(client, Role.ADMIN)
    assert client.put("/api/admin/settings", json={"settings": {"alarm_days_threshold": 0}}).status_code == 400
    assert client.put("/api/admin/settings", json=["nope"]).status_code == 400


class ReachableMailer(FakeMailer):
    def __init__(self, ok):
        super().__init__(enabled=True)
        self._ok = ok

    def test_connection(self):
        return self._ok


def test_email_check_reports_disabled_smtp(client):
    _login_as(client, Role.ADMIN)
    body = client.post("/api/admin/test-email").get_json()
    assert body == {"success": False, "message": "SMTP nicht konfiguriert"}


@pytest.mark.parametrize("ok", [True, False])
def test_email_check_reports_connection_result(client, container, ok):
    container.email_service = ReachableMailer(ok)
    _login_as(client, Role.ADMIN)
    assert client.post("/api/admin/test-email").get_json()["success"] is ok
