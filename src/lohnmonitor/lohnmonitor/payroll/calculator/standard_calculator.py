from __future__ import annotations

import math
from typing import Optional

from ...common.validators import require_non_negative
from ...core.constants import FLAT_BONUS_100, FLAT_BONUS_150, WEEKS_PER_MONTH
from ...core.exceptions import ConfigurationError
from ..model import AllowanceSet, CompensationBreakdown
from .base import CompensationCalculator


def round_money(value: float) -> float:
    """Two decimals, halves rounded up (same result as the payroll documents)."""
    return math.floor(value * 100 + 0.5) / 100


def prorate(weekly_hours: float, full_time_value: float, reference_weekly_hours: float) -> float:
    if not full_time_value or full_time_value <= 0:
        return 0.0
    return (weekly_hours / reference_weekly_hours) * full_time_value


class StandardCompensationCalculator(CompensationCalculator):
    """Standard rule: monthly hours x rate + prorated allowances + flat bonuses.

    Every reported figure is rounded on its own unrounded value; totals are
    summed before rounding.
    """

    def compute_gross(
        self,
        weekly_hours: float,
        hourly_rate: float,
        allowances: AllowanceSet,
        reference_weekly_hours: Optional[float],
    ) -> CompensationBreakdown:
        if reference_weekly_hours is None or reference_weekly_hours <= 0:
            raise ConfigurationError(
                f"Reference weekly hours must be positive, got {reference_weekly_hours!r}"
            )
        weekly_hours = require_non_negative(weekly_hours, "Wochenstunden")
        hourly_rate = require_non_negative(hourly_rate, "Stundenlohn")

        monthly_hours = weekly_hours * WEEKS_PER_MONTH
        base_gross = monthly_hours * hourly_rate

        group = prorate(weekly_hours, allowances.group_allowance_full_time, reference_weekly_hours)
        shift = prorate(weekly_hours, allowances.shift_allowance_full_time, reference_weekly_hours)
        bonus_100 = FLAT_BONUS_100 if allowances.flat_bonus_100 else 0.0
        bonus_150 = FLAT_BONUS_150 if allowances.flat_bonus_150 else 0.0

        total_allowances = group + shift + bonus_100 + bonus_150
        total_gross = base_gross + total_allowances

        return CompensationBreakdown(
            weekly_hours=weekly_hours,
            hourly_rate=hourly_rate,
            monthly_hours=round_money(monthly_hours),
            base_gross=round_money(base_gross),
            group_allowance=round_money(group),
            shift_allowance=round_money(shift),
            flat_bonus_100=bonus_100,
            flat_bonus_150=bonus_150,
            total_allowances=round_money(total_allowances),
            total_gross=round_money(total_gross),
        )
