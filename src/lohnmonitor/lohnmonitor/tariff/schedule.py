"""AVR Bayern step durations (Entgeltstufen).

Months an employee must spend in a step before the automatic promotion to the
next one. Step 6 ("Sonderstufe") is terminal and has no duration.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

MAX_STEP = 6

STEP_DURATION_MONTHS: Mapping[int, int] = MappingProxyType(
    {
        1: 12,
        2: 24,
        3: 60,
        4: 84,
        5: 180,
    }
)


def cumulative_months(up_to_step: int) -> int:
    """Sum of durations for steps ``1..up_to_step`` inclusive."""
    return sum(STEP_DURATION_MONTHS[s] for s in range(1, min(up_to_step, MAX_STEP - 1) + 1))
