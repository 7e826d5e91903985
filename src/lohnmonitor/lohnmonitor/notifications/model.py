from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import NotificationKind


@dataclass(frozen=True)
class Notification:
    """Domain entity: one alert about a pending step promotion."""

    notification_id: int
    employee_id: int
    kind: NotificationKind
    message: str
    created_at: datetime
    acknowledged: bool = False
    acknowledged_at: Optional[datetime] = None
    acknowledged_by: Optional[str] = None
    sent: bool = False
    sent_at: Optional[datetime] = None


@dataclass(frozen=True)
class NotificationRow:
    """Read-model for the notification list (joined with the employee)."""

    notification: Notification
    personnel_number: str
    employee_name: str
    department: Optional[str]
