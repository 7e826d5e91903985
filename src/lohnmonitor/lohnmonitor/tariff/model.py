from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AlarmLevel


@dataclass(frozen=True)
class AlarmDecision:
    alarm: bool
    level: AlarmLevel


@dataclass(frozen=True)
class PromotionStatus:
    """Derived promotion state of one employee; recomputed on every query."""

    next_promotion_date: Optional[date]
    days_remaining: Optional[int]
    alarm_level: AlarmLevel
    alarm: bool = False


@dataclass(frozen=True)
class StepReconstruction:
    """Step an employee should hold purely from elapsed tenure (audit view)."""

    step: int
    next_promotion_date: Optional[date]
    days_remaining: Optional[int]
    is_special_step: bool
