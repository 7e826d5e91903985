from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import NotificationKind
from .model import Notification, NotificationRow


class NotificationRepository(Protocol):
    def create(
        self,
        *,
        employee_id: int,
        kind: NotificationKind,
        message: str,
        created_at: datetime,
        acknowledged: bool = False,
        acknowledged_at: Optional[datetime] = None,
        acknowledged_by: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, notification_id: int) -> Optional[Notification]:
        raise NotImplementedError

    def find_recent(self, *, employee_id: int, kind: NotificationKind, since: datetime) -> Sequence[Notification]:
        """Notifications created at or after ``since``, newest first."""
        raise NotImplementedError

    def find_open(self, *, employee_id: int, kind: NotificationKind) -> Optional[Notification]:
        """Newest unacknowledged notification, regardless of age."""
        raise NotImplementedError

    def acknowledge(self, *, notification_id: int, acknowledged_by: str, acknowledged_at: datetime) -> bool:
        raise NotImplementedError

    def mark_sent(self, *, notification_id: int, sent_at: datetime) -> bool:
        raise NotImplementedError

    def count_unacknowledged(self) -> int:
        raise NotImplementedError

    def list_latest(self, *, unacknowledged_only: bool = False, limit: int = 100) -> Sequence[NotificationRow]:
        raise NotImplementedError
