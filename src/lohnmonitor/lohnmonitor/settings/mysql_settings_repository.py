from __future__ import annotations

from typing import Dict, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT value FROM settings WHERE `key`=%s", (key,))
            row = fetchone(cur)
            return None if row is None else row["value"]

    def get_all(self) -> Dict[str, str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT `key`, value FROM settings ORDER BY `key`")
            return {r["key"]: r["value"] for r in fetchall(cur)}

    def upsert(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO settings(`key`, value) VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE value=VALUES(value)
                """,
                (key, value),
            )
