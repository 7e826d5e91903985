from __future__ import annotations

from typing import Optional

from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..settings.service import SettingsService
from .calculator.base import CompensationCalculator
from .calculator.standard_calculator import StandardCompensationCalculator
from .model import CompensationBreakdown


class SalaryService:
    def __init__(
        self,
        employees: EmployeeRepository,
        settings: SettingsService,
        *,
        calculator: Optional[CompensationCalculator] = None,
    ):
        self._employees = employees
        self._settings = settings
        self._calculator = calculator or StandardCompensationCalculator()

    def compute_for(self, employee: Employee, *, reference_weekly_hours: float) -> CompensationBreakdown:
        return self._calculator.compute_gross(
            employee.weekly_hours,
            employee.hourly_rate,
            employee.allowances,
            reference_weekly_hours,
        )

    def compute_for_employee_id(self, employee_id: int) -> CompensationBreakdown:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Mitarbeiter nicht gefunden")
        return self.compute_for(employee, reference_weekly_hours=self._settings.reference_weekly_hours())
