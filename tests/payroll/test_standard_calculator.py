from __future__ import annotations

import pytest

from src.lohnmonitor.lohnmonitor.core.exceptions import ConfigurationError, ValidationError
from src.lohnmonitor.lohnmonitor.payroll.calculator.standard_calculator import (
    StandardCompensationCalculator,
    round_money,
)
from src.lohnmonitor.lohnmonitor.payroll.model import AllowanceSet


ALLOWANCES = AllowanceSet(group_allowance_full_time=50, shift_allowance_full_time=75)


def test_full_time_gross():
    calc = StandardCompensationCalculator()
    b = calc.compute_gross(40, 18.50, ALLOWANCES, 40)

    assert b.monthly_hours == 173.92
    assert b.base_gross == 3217.52
    assert b.group_allowance == 50.00
    assert b.shift_allowance == 75.00
    assert b.flat_bonus_100 == 0
    assert b.flat_bonus_150 == 0
    assert b.total_allowances == 125.00
    assert b.total_gross == 3342.52


def test_half_time_prorates_allowances():
    b = StandardCompensationCalculator().compute_gross(20, 18.50, ALLOWANCES, 40)
    assert b.group_allowance == 25.00
    assert b.shift_allowance == 37.50


def test_flat_bonuses_are_not_prorated_and_add_up():
    both = AllowanceSet(flat_bonus_100=True, flat_bonus_150=True)
    b = StandardCompensationCalculator().compute_gross(10, 15.0, both, 40)
    assert b.flat_bonus_100 == 100
    assert b.flat_bonus_150 == 150
    assert b.total_allowances == 250.00


def test_non_positive_allowance_values_pay_nothing():
    b = StandardCompensationCalculator().compute_gross(
        40, 10.0, AllowanceSet(group_allowance_full_time=-20, shift_allowance_full_time=0), 40
    )
    assert b.group_allowance == 0
    assert b.shift_allowance == 0
    assert b.total_allowances == 0


def test_totals_are_rounded_from_unrounded_components():
    thirds = AllowanceSet(group_allowance_full_time=10, shift_allowance_full_time=10)
    b = StandardCompensationCalculator().compute_gross(1, 0, thirds, 3)
    assert b.group_allowance == 3.33
    assert b.shift_allowance == 3.33
    assert b.total_allowances == 6.67
    assert b.total_gross == 6.67


@pytest.mark.parametrize("reference", [0, -40, None])
def test_invalid_reference_hours_is_configuration_error(reference):
    with pytest.raises(ConfigurationError):
        StandardCompensationCalculator().compute_gross(40, 18.50, ALLOWANCES, reference)


def test_negative_hours_rejected():
    with pytest.raises(ValidationError):
        StandardCompensationCalculator().compute_gross(-1, 18.50, ALLOWANCES, 40)


def test_round_money_rounds_halves_up():
    assert round_money(0.125) == 0.13
    assert round_money(2.5) == 2.5
    assert round_money(1.234) == 1.23


def test_as_dict_uses_document_keys():
    d = StandardCompensationCalculator().compute_gross(40, 18.50, ALLOWANCES, 40).as_dict()
    assert d["gesamtBrutto"] == 3342.52
    assert d["zulagen"]["gesamt"] == 125.00
    assert d["monatsstunden"] == 173.92
