from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def count(self, *, active: bool) -> int:
        raise NotImplementedError

    def list_departments(self) -> Sequence[str]:
        """Distinct non-empty departments of active employees."""
        raise NotImplementedError
