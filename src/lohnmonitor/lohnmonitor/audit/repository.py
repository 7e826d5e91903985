from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import AuditAction


class AuditRepository(Protocol):
    def append(self, *, user_id: Optional[int], action: AuditAction, details: dict) -> int:
        raise NotImplementedError
