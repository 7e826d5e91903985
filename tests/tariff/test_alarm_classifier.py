from __future__ import annotations

from datetime import date

import pytest

from src.lohnmonitor.lohnmonitor.core.enums import AlarmLevel
from src.lohnmonitor.lohnmonitor.core.exceptions import ConfigurationError
from src.lohnmonitor.lohnmonitor.tariff.alarm import classify
from src.lohnmonitor.lohnmonitor.tariff.status import evaluate_employee

from conftest import make_employee


@pytest.mark.parametrize(
    "remaining, alarm, level",
    [
        (-1, True, AlarmLevel.RED),
        (0, True, AlarmLevel.RED),
        (40, True, AlarmLevel.RED),
        (41, False, AlarmLevel.YELLOW),
        (80, False, AlarmLevel.YELLOW),
        (81, False, AlarmLevel.GREEN),
        (None, False, AlarmLevel.GREEN),
    ],
)
def test_classify_threshold_40(remaining, alarm, level):
    decision = classify(remaining, 40)
    assert decision.alarm is alarm
    assert decision.level == level


def test_classify_uses_given_threshold():
    assert classify(15, 10).level == AlarmLevel.YELLOW
    assert classify(21, 10).level == AlarmLevel.GREEN


@pytest.mark.parametrize("threshold", [0, -5, None, 40.9, "40", True])
def test_classify_rejects_invalid_threshold(threshold):
    with pytest.raises(ConfigurationError):
        classify(10, threshold)


def test_evaluate_employee_combines_date_and_level():
    emp = make_employee(1, hire_date=date(2023, 3, 15), step=2)
    status = evaluate_employee(emp, 40, date(2026, 3, 1))
    assert status.next_promotion_date == date(2026, 3, 15)
    assert status.days_remaining == 14
    assert status.alarm_level == AlarmLevel.RED
    assert status.alarm is True


def test_evaluate_employee_terminal_step_is_green():
    emp = make_employee(1, hire_date=date(1990, 1, 1), step=6)
    status = evaluate_employee(emp, 40, date(2026, 3, 1))
    assert status.next_promotion_date is None
    assert status.days_remaining is None
    assert status.alarm_level == AlarmLevel.GREEN
    assert status.alarm is False


def test_classify_accepts_whole_float_threshold():
    assert classify(40, 40.0).level == AlarmLevel.RED
    assert classify(41, 40.0).level == AlarmLevel.YELLOW
