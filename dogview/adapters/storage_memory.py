from __future__ import annotations

from typing import Dict, Optional

from dogview.domain.ports import PreferenceStorePort


class MemoryPreferenceStore(PreferenceStorePort):
    """In-memory preference store used for tests and offline development."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.blobs: Dict[str, str] = dict(initial or {})
        self.writes = 0

    def get_blob(self, key: str) -> Optional[str]:
        return self.blobs.get(key)

    def set_blob(self, key: str, value: str) -> None:
        self.blobs[key] = str(value)
        self.writes += 1
