from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike, add_months, as_date, days_until, months_between
from .model import StepReconstruction
from .schedule import MAX_STEP, STEP_DURATION_MONTHS, cumulative_months


def next_promotion_date(hire_date: DateLike, current_step: int) -> Optional[date]:
    """Date of the next automatic step promotion, None at the terminal step."""
    if current_step >= MAX_STEP:
        return None
    return add_months(hire_date, cumulative_months(current_step))


def days_remaining(target: Optional[DateLike], today: DateLike) -> Optional[int]:
    return days_until(target, today)


def is_promotion_imminent(remaining: Optional[int], threshold_days: int) -> bool:
    if remaining is None:
        return False
    return 0 <= remaining <= threshold_days


def current_step_from_hire_date(hire_date: DateLike, today: DateLike) -> StepReconstruction:
    """Walk the schedule cumulatively over the months elapsed since hire.

    Only a reference computation; stored steps are never corrected from it.
    """
    elapsed = months_between(hire_date, today)

    step = 1
    consumed = 0
    for s in range(1, MAX_STEP):
        needed = STEP_DURATION_MONTHS[s]
        if elapsed < consumed + needed:
            break
        step = s + 1
        consumed += needed

    target = next_promotion_date(hire_date, step)
    return StepReconstruction(
        step=step,
        next_promotion_date=target,
        days_remaining=days_until(target, as_date(today)),
        is_special_step=step >= MAX_STEP,
    )


def format_step(step: int) -> str:
    if step >= MAX_STEP:
        return f"Stufe {step} (Sonderstufe)"
    return f"Stufe {step}"
