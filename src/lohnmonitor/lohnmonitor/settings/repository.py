from __future__ import annotations

from typing import Dict, Optional, Protocol


class SettingsRepository(Protocol):
    """Key/value settings maintained by administrators."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def get_all(self) -> Dict[str, str]:
        raise NotImplementedError

    def upsert(self, key: str, value: str) -> None:
        raise NotImplementedError
