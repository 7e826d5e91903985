from __future__ import annotations

from ..common.datetime_utils import DateLike
from ..employees.model import Employee
from .alarm import classify
from .model import PromotionStatus
from .promotion import days_remaining, next_promotion_date


def evaluate_employee(record: Employee, threshold_days: int, today: DateLike) -> PromotionStatus:
    """Promotion status of one employee as shown on the dashboard."""
    target = next_promotion_date(record.hire_date, record.step)
    remaining = days_remaining(target, today)
    decision = classify(remaining, threshold_days)
    return PromotionStatus(
        next_promotion_date=target,
        days_remaining=remaining,
        alarm_level=decision.level,
        alarm=decision.alarm,
    )
