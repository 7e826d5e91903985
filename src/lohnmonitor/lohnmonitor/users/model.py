from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: application user (HR staff).

    Note: plain data object, no DB access here.
    """

    user_id: int
    username: str
    password_hash: str
    role: Role
    active: bool = True
