from __future__ import annotations

import json
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.enums import AuditAction
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .repository import AuditRepository


class MySQLAuditRepository(AuditRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, *, user_id: Optional[int], action: AuditAction, details: dict) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO audit_logs(user_id, action, details, created_at) VALUES(%s,%s,%s,%s)",
                (user_id, action.value, json.dumps(details, default=str), now_local()),
            )
            return int(cur.lastrowid)
