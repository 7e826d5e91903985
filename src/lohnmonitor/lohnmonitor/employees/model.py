from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..payroll.model import AllowanceSet


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee tenure and pay record.

    Owned by the record store; the engine only derives values from it.
    """

    employee_id: int
    personnel_number: str
    name: str
    hire_date: date
    step: int
    weekly_hours: float
    hourly_rate: float
    allowances: AllowanceSet = field(default_factory=AllowanceSet)
    department: Optional[str] = None
    pay_group: Optional[str] = None
    active: bool = True
