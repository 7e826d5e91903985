from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from src.lohnmonitor.lohnmonitor.common.datetime_utils import add_months
from src.lohnmonitor.lohnmonitor.tariff.promotion import (
    current_step_from_hire_date,
    days_remaining,
    format_step,
    is_promotion_imminent,
    next_promotion_date,
)
from src.lohnmonitor.lohnmonitor.tariff.schedule import MAX_STEP, STEP_DURATION_MONTHS


def test_schedule_covers_every_step_below_terminal():
    assert dict(STEP_DURATION_MONTHS) == {1: 12, 2: 24, 3: 60, 4: 84, 5: 180}
    with pytest.raises(TypeError):
        STEP_DURATION_MONTHS[1] = 1


@pytest.mark.parametrize("step", [1, 2, 3, 4, 5])
def test_next_promotion_is_hire_date_plus_cumulative_months(step):
    hire = date(2019, 7, 1)
    months = sum(STEP_DURATION_MONTHS[s] for s in range(1, step + 1))
    assert next_promotion_date(hire, step) == add_months(hire, months)


def test_next_promotion_examples():
    assert next_promotion_date(date(2020, 3, 15), 1) == date(2021, 3, 15)
    assert next_promotion_date(date(2020, 3, 15), 3) == date(2028, 3, 15)
    assert next_promotion_date(date(2000, 1, 1), 5) == date(2030, 1, 1)


@pytest.mark.parametrize("step", [6, 7])
def test_terminal_step_has_no_next_promotion(step):
    assert next_promotion_date(date(2000, 1, 1), step) is None


def test_next_promotion_from_leap_day_rolls_into_march():
    assert next_promotion_date(date(2024, 2, 29), 1) == date(2025, 3, 1)


def test_days_remaining_decreases_as_today_advances():
    target = date(2026, 3, 15)
    start = datetime(2026, 2, 1, 17, 30)
    values = [days_remaining(target, start + timedelta(days=i)) for i in range(60)]
    assert values[0] == 42
    assert all(later == earlier - 1 for earlier, later in zip(values, values[1:]))
    assert values[-1] < 0


def test_days_remaining_none_without_target():
    assert days_remaining(None, date(2026, 3, 1)) is None


@pytest.mark.parametrize(
    "remaining, expected",
    [(None, False), (-1, False), (0, True), (40, True), (41, False)],
)
def test_is_promotion_imminent(remaining, expected):
    assert is_promotion_imminent(remaining, 40) is expected


def test_current_step_from_hire_date_walks_schedule():
    res = current_step_from_hire_date(date(2020, 3, 15), date(2026, 3, 1))
    assert res.step == 3
    assert res.next_promotion_date == date(2028, 3, 15)
    assert res.days_remaining == 745
    assert res.is_special_step is False


def test_current_step_for_new_hire_is_one():
    res = current_step_from_hire_date(date(2026, 3, 1), date(2026, 3, 1))
    assert res.step == 1
    assert res.next_promotion_date == date(2027, 3, 1)
    assert res.days_remaining == 365


def test_current_step_reaches_special_step():
    res = current_step_from_hire_date(date(1990, 1, 1), date(2026, 3, 1))
    assert res.step == MAX_STEP
    assert res.next_promotion_date is None
    assert res.days_remaining is None
    assert res.is_special_step is True


def test_format_step():
    assert format_step(3) == "Stufe 3"
    assert format_step(6) == "Stufe 6 (Sonderstufe)"
