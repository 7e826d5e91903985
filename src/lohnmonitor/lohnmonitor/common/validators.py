from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} darf nicht leer sein")
    return value.strip()


def require_non_negative(value: Any, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} ist keine Zahl: {value!r}")
    if number < 0:
        raise ValidationError(f"{field_name} darf nicht negativ sein")
    return number
