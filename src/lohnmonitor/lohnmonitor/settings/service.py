from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..audit.repository import AuditRepository
from ..core.constants import (
    DEFAULT_ALARM_DAYS_THRESHOLD,
    DEFAULT_REFERENCE_WEEKLY_HOURS,
    SETTING_ALARM_DAYS_THRESHOLD,
    SETTING_REFERENCE_WEEKLY_HOURS,
)
from ..core.enums import AuditAction
from ..core.exceptions import ConfigurationError, ValidationError
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """Settings the calculators need, resolved once per run or request."""

    threshold_days: int
    reference_weekly_hours: float


def _whole_days(raw: str) -> int:
    # "60", "60.0" and "60.5" all mean 60 days
    return int(float(raw))


_PARSERS: Dict[str, Callable[[str], float]] = {
    SETTING_ALARM_DAYS_THRESHOLD: _whole_days,
    SETTING_REFERENCE_WEEKLY_HOURS: float,
}


def _convert(raw: Any, convert: Callable[[str], float]) -> Optional[float]:
    if raw is None or not str(raw).strip():
        return None
    try:
        return convert(str(raw).strip())
    except (ValueError, OverflowError):
        return None


def _parse(raw: Optional[str], key: str) -> Optional[float]:
    value = _convert(raw, _PARSERS[key])
    if value is None and raw is not None and str(raw).strip():
        logger.warning("Setting %s=%r is not a number, using default", key, raw)
    return value


def _stored_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class SettingsService:
    """Use case: resolve engine configuration from the settings store.

    Absent or unparseable values fall back to the defaults (40 days / 40 hours).
    A parsed but non-positive value is a configuration error.
    """

    def __init__(
        self,
        settings: SettingsRepository,
        *,
        env_threshold_days: Optional[int] = None,
        audit: Optional[AuditRepository] = None,
    ):
        self._settings = settings
        self._env_threshold_days = env_threshold_days
        self._audit = audit

    def threshold_days(self) -> int:
        value = _parse(self._settings.get(SETTING_ALARM_DAYS_THRESHOLD), SETTING_ALARM_DAYS_THRESHOLD)
        if value is None:
            value = self._env_threshold_days or DEFAULT_ALARM_DAYS_THRESHOLD
        if value <= 0:
            raise ConfigurationError(f"{SETTING_ALARM_DAYS_THRESHOLD} must be positive, got {value}")
        return int(value)

    def reference_weekly_hours(self) -> float:
        value = _parse(self._settings.get(SETTING_REFERENCE_WEEKLY_HOURS), SETTING_REFERENCE_WEEKLY_HOURS)
        if value is None:
            value = DEFAULT_REFERENCE_WEEKLY_HOURS
        if value <= 0:
            raise ConfigurationError(f"{SETTING_REFERENCE_WEEKLY_HOURS} must be positive, got {value}")
        return float(value)

    def resolve(self) -> EngineConfig:
        return EngineConfig(
            threshold_days=self.threshold_days(),
            reference_weekly_hours=self.reference_weekly_hours(),
        )

    def all(self) -> Dict[str, str]:
        return dict(self._settings.get_all())

    def update(self, values: Any, *, username: str, user_id: Optional[int] = None) -> list[str]:
        """Store admin-edited settings; engine values must be positive numbers."""
        if not isinstance(values, dict) or not values:
            raise ValidationError("Ungültige Einstellungen")

        for key, value in values.items():
            if not isinstance(key, str) or not key.strip():
                raise ValidationError("Ungültiger Einstellungsname")
            parser = _PARSERS.get(key)
            if parser is None:
                continue
            number = None if isinstance(value, bool) else _convert(value, parser)
            if number is None or number <= 0:
                raise ValidationError(f"{key} muss eine positive Zahl sein")

        for key, value in values.items():
            self._settings.upsert(key, _stored_text(value))

        keys = list(values)
        logger.info("Settings %s updated by %s", ", ".join(keys), username)
        self._write_audit(user_id=user_id, details={"keys": keys, "updatedBy": username})
        return keys

    def _write_audit(self, *, user_id: Optional[int], details: dict) -> None:
        if self._audit is None:
            return
        try:
            self._audit.append(user_id=user_id, action=AuditAction.SETTINGS_UPDATED, details=details)
        except Exception:
            logger.exception("Could not write audit log entry")
