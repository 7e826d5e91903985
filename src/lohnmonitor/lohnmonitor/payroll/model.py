from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AllowanceSet:
    """Allowances as stored on the employee record (JSON blob).

    ``*_full_time`` values apply at the full-time reference hours and are
    prorated by the calculator. Both flat bonuses may be set; both are paid.
    """

    group_allowance_full_time: float = 0.0
    shift_allowance_full_time: float = 0.0
    flat_bonus_100: bool = False
    flat_bonus_150: bool = False

    @classmethod
    def zero(cls) -> "AllowanceSet":
        return cls()


@dataclass(frozen=True)
class CompensationBreakdown:
    weekly_hours: float
    hourly_rate: float
    monthly_hours: float
    base_gross: float
    group_allowance: float
    shift_allowance: float
    flat_bonus_100: float
    flat_bonus_150: float
    total_allowances: float
    total_gross: float

    def as_dict(self) -> dict:
        return {
            "wochenstunden": self.weekly_hours,
            "monatsstunden": self.monthly_hours,
            "stundenlohn": self.hourly_rate,
            "basisBrutto": self.base_gross,
            "zulagen": {
                "gruppeZulage": self.group_allowance,
                "schichtZulage": self.shift_allowance,
                "tl100": self.flat_bonus_100,
                "tl150": self.flat_bonus_150,
                "gesamt": self.total_allowances,
            },
            "gesamtBrutto": self.total_gross,
        }
