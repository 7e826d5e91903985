from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..audit.repository import AuditRepository
from ..common.datetime_utils import now_local
from ..core.enums import AuditAction, NotificationKind, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..employees.repository import EmployeeRepository
from .model import Notification
from .repository import NotificationRepository

logger = logging.getLogger(__name__)

ACKNOWLEDGE_ROLES = (Role.ADMIN, Role.EDITOR)


class NotificationService:
    """Use case: mark a promotion alarm as handled."""

    def __init__(
        self,
        notifications: NotificationRepository,
        employees: EmployeeRepository,
        audit: Optional[AuditRepository] = None,
    ):
        self._notifications = notifications
        self._employees = employees
        self._audit = audit

    def acknowledge(
        self,
        *,
        current_role: Role,
        employee_id: int,
        username: str,
        user_id: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Notification:
        if current_role not in ACKNOWLEDGE_ROLES:
            raise AuthorizationError("Keine Berechtigung für diese Aktion")

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Mitarbeiter nicht gefunden")

        now = now or now_local()
        kind = NotificationKind.PROMOTION
        open_notification = self._notifications.find_open(employee_id=employee_id, kind=kind)

        if open_notification:
            self._notifications.acknowledge(
                notification_id=open_notification.notification_id,
                acknowledged_by=username,
                acknowledged_at=now,
            )
            notification_id = open_notification.notification_id
        else:
            notification_id = self._notifications.create(
                employee_id=employee_id,
                kind=kind,
                message=f"Stufenaufstieg bestätigt: {employee.name}",
                created_at=now,
                acknowledged=True,
                acknowledged_at=now,
                acknowledged_by=username,
            )

        self._write_audit(
            user_id=user_id,
            details={
                "employeeId": employee_id,
                "personalnummer": employee.personnel_number,
                "acknowledgedBy": username,
            },
        )

        notification = self._notifications.get_by_id(notification_id)
        if notification is None:
            raise NotFoundError("Benachrichtigung nicht gefunden")
        return notification

    def _write_audit(self, *, user_id: Optional[int], details: dict) -> None:
        if self._audit is None:
            return
        try:
            self._audit.append(user_id=user_id, action=AuditAction.ALARM_ACKNOWLEDGED, details=details)
        except Exception:
            logger.exception("Could not write audit log entry")
