from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import AllowanceSet, CompensationBreakdown


class CompensationCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute_gross(
        self,
        weekly_hours: float,
        hourly_rate: float,
        allowances: AllowanceSet,
        reference_weekly_hours: Optional[float],
    ) -> CompensationBreakdown:
        raise NotImplementedError
