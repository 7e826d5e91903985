"""Suppression of duplicate promotion alerts.

Two distinct windows are involved:

* notify cooldown (7 days): an *unacknowledged* alert of the same kind for the
  same employee blocks a new one;
* acknowledged look-back (30 days): only used by the dashboard to show an
  alarm row as already handled.

Acknowledging an alert never extends the cooldown.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Iterable, Optional, Sequence

from ..core.constants import ACKNOWLEDGED_LOOKBACK_DAYS, NOTIFY_COOLDOWN_DAYS
from ..core.enums import NotificationKind
from .model import Notification
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationDeduper:
    def __init__(
        self,
        notifications: NotificationRepository,
        *,
        cooldown_days: int = NOTIFY_COOLDOWN_DAYS,
        acknowledged_lookback_days: int = ACKNOWLEDGED_LOOKBACK_DAYS,
    ):
        self._notifications = notifications
        self._cooldown = timedelta(days=int(cooldown_days))
        self._ack_lookback = timedelta(days=int(acknowledged_lookback_days))

    def recent_for(self, employee_id: int, kind: NotificationKind, *, now: datetime) -> Sequence[Notification]:
        return self._notifications.find_recent(employee_id=employee_id, kind=kind, since=now - self._cooldown)

    def should_notify(
        self,
        employee_id: int,
        kind: NotificationKind,
        recent_notifications: Iterable[Notification],
        *,
        now: datetime,
    ) -> bool:
        since = now - self._cooldown
        for n in recent_notifications:
            if n.employee_id != employee_id or n.kind != kind:
                continue
            if not n.acknowledged and n.created_at >= since:
                return False
        return True

    def record_notification(
        self,
        employee_id: int,
        kind: NotificationKind,
        message: str,
        *,
        now: datetime,
    ) -> Notification:
        notification_id = self._notifications.create(
            employee_id=employee_id,
            kind=kind,
            message=message,
            created_at=now,
        )
        logger.debug("Created %s notification %s for employee %s", kind.value, notification_id, employee_id)
        return Notification(
            notification_id=notification_id,
            employee_id=employee_id,
            kind=kind,
            message=message,
            created_at=now,
        )

    def recently_acknowledged(
        self,
        employee_id: int,
        kind: NotificationKind,
        *,
        now: datetime,
    ) -> Optional[Notification]:
        recent = self._notifications.find_recent(employee_id=employee_id, kind=kind, since=now - self._ack_lookback)
        for n in recent:
            if n.acknowledged:
                return n
        return None
