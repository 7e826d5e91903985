from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from ..payroll.allowances import load_allowances
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, personalnummer, name, abteilung, eintrittsdatum, entgeltgruppe,
    stufe, wochenstunden, stundenlohn, zulagen, aktiv
"""


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        personnel_number=str(r["personalnummer"]),
        name=r["name"],
        department=r.get("abteilung"),
        hire_date=normalize_mysql_date(r["eintrittsdatum"]),
        pay_group=r.get("entgeltgruppe"),
        step=int(r["stufe"]),
        weekly_hours=float(r.get("wochenstunden") or 0),
        hourly_rate=float(r.get("stundenlohn") or 0),
        allowances=load_allowances(r.get("zulagen"), record_ref=r.get("personalnummer")),
        active=bool(r.get("aktiv", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE aktiv=1 ORDER BY employee_id ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def count(self, *, active: bool) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM employees WHERE aktiv=%s", (1 if active else 0,))
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def list_departments(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT abteilung
                FROM employees
                WHERE aktiv=1 AND abteilung IS NOT NULL AND abteilung <> ''
                ORDER BY abteilung
                """
            )
            return [r["abteilung"] for r in fetchall(cur)]
