from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    ADMIN = "Admin"
    EDITOR = "Editor"
    VIEWER = "Viewer"


class AlarmLevel(str, Enum):
    """Traffic-light urgency of an upcoming or overdue step promotion."""

    RED = "rot"
    YELLOW = "gelb"
    GREEN = "gruen"


class NotificationKind(str, Enum):
    PROMOTION = "stufenaufstieg"


class AuditAction(str, Enum):
    ALARM_ACKNOWLEDGED = "ALARM_ACKNOWLEDGED"
    SCAN_TRIGGERED = "SCAN_TRIGGERED"
    SETTINGS_UPDATED = "SETTINGS_UPDATED"
