"""Decoding of the allowance JSON stored on employee rows.

Stored shape: ``{"gruppe": 50, "schicht": 75, "tl100": false, "tl150": false}``.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional, Union

from ..core.exceptions import DataError
from .model import AllowanceSet

logger = logging.getLogger(__name__)


def _amount(raw: Any, key: str) -> float:
    if raw is None or raw == "":
        return 0.0
    if isinstance(raw, bool):
        raise DataError(f"Allowance {key!r} must be a number, got {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise DataError(f"Allowance {key!r} must be a number, got {raw!r}") from e


def decode_allowances(raw: Union[str, bytes, dict, None]) -> AllowanceSet:
    """Strict decoder; raises DataError on malformed input."""
    if raw is None or raw == "" or raw == b"":
        return AllowanceSet.zero()

    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise DataError(f"Allowance JSON is malformed: {e}") from e
    else:
        data = raw

    if data is None:
        return AllowanceSet.zero()
    if not isinstance(data, dict):
        raise DataError(f"Allowance JSON must be an object, got {type(data).__name__}")

    return AllowanceSet(
        group_allowance_full_time=_amount(data.get("gruppe"), "gruppe"),
        shift_allowance_full_time=_amount(data.get("schicht"), "schicht"),
        flat_bonus_100=bool(data.get("tl100")),
        flat_bonus_150=bool(data.get("tl150")),
    )


def load_allowances(raw: Union[str, bytes, dict, None], *, record_ref: Optional[object] = None) -> AllowanceSet:
    """Tolerant decoder used at the store boundary: bad data means no allowances."""
    try:
        return decode_allowances(raw)
    except DataError as e:
        logger.warning("Ignoring allowances of employee %s: %s", record_ref, e)
        return AllowanceSet.zero()

