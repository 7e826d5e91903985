from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .audit.mysql_audit_repository import MySQLAuditRepository
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .mail.service import EmailService, SMTPConfig
from .notifications.deduper import NotificationDeduper
from .notifications.mysql_notification_repository import MySQLNotificationRepository
from .notifications.service import NotificationService
from .payroll.service import SalaryService
from .scan.orchestrator import ScanOrchestrator
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.service import SettingsService
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: MySQLUserRepository
    employees_repo: MySQLEmployeeRepository
    notifications_repo: MySQLNotificationRepository
    settings_repo: MySQLSettingsRepository
    audit_repo: MySQLAuditRepository

    auth_service: AuthService
    settings_service: SettingsService
    salary_service: SalaryService
    notification_service: NotificationService
    dashboard_service: DashboardService
    email_service: EmailService
    scan_orchestrator: ScanOrchestrator


def build_container(
    *,
    db_config: dict,
    smtp_config: Optional[dict] = None,
    env_threshold_days: Optional[int] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    users_repo = MySQLUserRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    notifications_repo = MySQLNotificationRepository(conn)
    settings_repo = MySQLSettingsRepository(conn)
    audit_repo = MySQLAuditRepository(conn)

    auth_service = AuthService(users_repo)
    settings_service = SettingsService(settings_repo, env_threshold_days=env_threshold_days, audit=audit_repo)
    salary_service = SalaryService(employees_repo, settings_service)
    deduper = NotificationDeduper(notifications_repo)
    notification_service = NotificationService(notifications_repo, employees_repo, audit_repo)
    dashboard_service = DashboardService(employees_repo, notifications_repo, settings_service, deduper, salary_service)
    email_service = EmailService(SMTPConfig.from_dict(smtp_config))
    scan_orchestrator = ScanOrchestrator(
        employees_repo,
        notifications_repo,
        settings_service,
        deduper,
        mailer=email_service,
    )

    return Container(
        conn=conn,
        users_repo=users_repo,
        employees_repo=employees_repo,
        notifications_repo=notifications_repo,
        settings_repo=settings_repo,
        audit_repo=audit_repo,
        auth_service=auth_service,
        settings_service=settings_service,
        salary_service=salary_service,
        notification_service=notification_service,
        dashboard_service=dashboard_service,
        email_service=email_service,
        scan_orchestrator=scan_orchestrator,
    )
