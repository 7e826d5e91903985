from __future__ import annotations

from typing import Optional

from ..core.enums import AlarmLevel
from ..core.exceptions import ConfigurationError
from .model import AlarmDecision


def classify(remaining: Optional[int], threshold_days: int) -> AlarmDecision:
    """Map days until promotion to a traffic-light level.

    Overdue and "within threshold" both yield red; telling them apart is up to
    the caller (negative ``remaining``). Watch zone is ``(threshold, 2*threshold]``.
    """
    if (
        isinstance(threshold_days, bool)
        or not isinstance(threshold_days, (int, float))
        or not float(threshold_days).is_integer()
        or threshold_days <= 0
    ):
        raise ConfigurationError(f"Alarm threshold must be a positive whole number of days, got {threshold_days!r}")
    threshold_days = int(threshold_days)

    if remaining is None:
        return AlarmDecision(alarm=False, level=AlarmLevel.GREEN)
    if remaining < 0:
        return AlarmDecision(alarm=True, level=AlarmLevel.RED)
    if remaining <= threshold_days:
        return AlarmDecision(alarm=True, level=AlarmLevel.RED)
    if remaining <= threshold_days * 2:
        return AlarmDecision(alarm=False, level=AlarmLevel.YELLOW)
    return AlarmDecision(alarm=False, level=AlarmLevel.GREEN)
