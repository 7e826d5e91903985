from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import NotificationKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Notification, NotificationRow
from .repository import NotificationRepository

_COLUMNS = """
    n.notification_id, n.employee_id, n.type, n.message, n.created_at,
    n.acknowledged, n.acknowledged_at, n.acknowledged_by, n.sent, n.sent_at
"""


def _to_notification(r: Dict[str, Any]) -> Notification:
    return Notification(
        notification_id=int(r["notification_id"]),
        employee_id=int(r["employee_id"]),
        kind=NotificationKind(r["type"]),
        message=r.get("message") or "",
        created_at=r["created_at"],
        acknowledged=bool(r.get("acknowledged")),
        acknowledged_at=r.get("acknowledged_at"),
        acknowledged_by=r.get("acknowledged_by"),
        sent=bool(r.get("sent")),
        sent_at=r.get("sent_at"),
    )


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO notifications(employee_id, type, message, created_at,
                                          acknowledged, acknowledged_at, acknowledged_by, sent)
                VALUES(%s,%s,%s,%s,%s,%s,%s,0)
                """,
                (
                    int(employee_id),
                    kind.value,
                    message,
                    created_at,
                    1 if acknowledged else 0,
                    acknowledged_at,
                    acknowledged_by,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, notification_id: int) -> Optional[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM notifications n WHERE n.notification_id=%s", (int(notification_id),))
            r = fetchone(cur)
            return _to_notification(r) if r else None

    def find_recent(self, *, employee_id: int, kind: NotificationKind, since: datetime) -> Sequence[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM notifications n
                WHERE n.employee_id=%s AND n.type=%s AND n.created_at >= %s
                ORDER BY n.created_at DESC
                """,
                (int(employee_id), kind.value, since),
            )
            return [_to_notification(r) for r in fetchall(cur)]

    def find_open(self, *, employee_id: int, kind: NotificationKind) -> Optional[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM notifications n
                WHERE n.employee_id=%s AND n.type=%s AND n.acknowledged=0
                ORDER BY n.created_at DESC
                LIMIT 1
                """,
                (int(employee_id), kind.value),
            )
            r = fetchone(cur)
            return _to_notification(r) if r else None

    def acknowledge(self, *, notification_id: int, acknowledged_by: str, acknowledged_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE notifications
                SET acknowledged=1, acknowledged_at=%s, acknowledged_by=%s
                WHERE notification_id=%s AND acknowledged=0
                """,
                (acknowledged_at, acknowledged_by, int(notification_id)),
            )
            return cur.rowcount > 0

    def mark_sent(self, *, notification_id: int, sent_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE notifications SET sent=1, sent_at=%s WHERE notification_id=%s",
                (sent_at, int(notification_id)),
            )
            return cur.rowcount > 0

    def count_unacknowledged(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM notifications WHERE acknowledged=0")
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def list_latest(self, *, unacknowledged_only: bool = False, limit: int = 100) -> Sequence[NotificationRow]:
        where = "WHERE n.acknowledged=0" if unacknowledged_only else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, e.personalnummer, e.name, e.abteilung
                FROM notifications n
                JOIN employees e ON e.employee_id = n.employee_id
                {where}
                ORDER BY n.created_at DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [
                NotificationRow(
                    notification=_to_notification(r),
                    personnel_number=str(r["personalnummer"]),
                    employee_name=r["name"],
                    department=r.get("abteilung"),
                )
                for r in fetchall(cur)
            ]
