"""Preference store backed by the browser's ``localStorage``.

``localStorage`` is only reachable through an async JavaScript round trip, so
the page hydrates the store once after the client connects; reads are then
served from the cached snapshot and writes go to both the cache and the
browser.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Optional

from dogview.domain.ports import PreferenceStorePort

LOGGER = logging.getLogger(__name__)

JsRunner = Callable[[str], Any]


class BrowserPreferenceStore(PreferenceStorePort):
    """Cache of ``localStorage`` entries for one browser client."""

    def __init__(self, run_javascript: JsRunner) -> None:
        """Args:
            run_javascript: ``nicegui.ui.run_javascript`` or a compatible
                callable; awaiting its return value yields the script result.
        """
        self._run_javascript = run_javascript
        self._cache: Dict[str, Optional[str]] = {}

    async def hydrate(self, key: str) -> Optional[str]:
        """Read ``key`` from ``localStorage`` into the cache and return it.

        A failed or timed-out read counts as a missing entry.
        """
        try:
            raw = await self._run_javascript(f"return localStorage.getItem({json.dumps(key)}) || '';")
        except Exception as exc:
            LOGGER.warning("Could not read %s from browser storage: %s", key, exc)
            raw = None
        value = raw if isinstance(raw, str) and raw else None
        self._cache[key] = value
        LOGGER.debug("Hydrated %s from browser storage (%s)", key, "hit" if value else "miss")
        return value

    def get_blob(self, key: str) -> Optional[str]:
        return self._cache.get(key)

    def set_blob(self, key: str, value: str) -> None:
        self._cache[key] = value
        self._run_javascript(f"localStorage.setItem({json.dumps(key)}, {json.dumps(value)});")


__all__ = ["BrowserPreferenceStore"]
