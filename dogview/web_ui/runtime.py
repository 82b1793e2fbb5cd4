"""NiceGUI runtime composition for dogview.

This module builds settings, adapters, and use cases once per process and
hands out one :class:`GalleryVM` per browser client.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

from dogview.adapters.dog_api_mock import DogApiMock
from dogview.adapters.dog_api_rest import DogApiRestAdapter
from dogview.adapters.storage_local import StorageLocal
from dogview.domain.ports import DogApiPort, PreferenceStorePort
from dogview.usecases.fetch_dogs import DogFetcher
from dogview.usecases.load_breeds import LoadBreeds
from dogview.usecases.load_images import LoadImages
from dogview.utils.logging import apply_gui_preferences
from dogview.viewmodels.gallery_vm import GalleryVM
from dogview.viewmodels.render import RenderSink
from dogview.viewmodels.settings_vm import SettingsVM

LOGGER = logging.getLogger(__name__)

ENV_SETTINGS_DIR = "DOGVIEW_SETTINGS_DIR"


class WebRuntime:
    """Process-wide wiring shared by every gallery page."""

    def __init__(
        self,
        *,
        settings_dir: Optional[str] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        offline: bool = False,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        env = os.environ if environ is None else environ
        self.offline = offline
        self.settings_vm = SettingsVM()
        self.storage = StorageLocal(root_dir=settings_dir or env.get(ENV_SETTINGS_DIR) or ".")

        self._load_settings_defaults()
        self.settings_vm.apply_env(env)
        if overrides:
            self.settings_vm.apply_dict({k: v for k, v in overrides.items() if v is not None})
        apply_gui_preferences(self.settings_vm.debug_logging)

        self.dog_api: DogApiPort = self._build_dog_api()
        self.fetcher = DogFetcher(self.dog_api)
        self.uc_load_images = LoadImages(self.fetcher)
        self.uc_load_breeds = LoadBreeds(self.fetcher)

    def settings_payload(self) -> Dict[str, Any]:
        payload = self.settings_vm.to_dict()
        if payload.get("api_key"):
            payload["api_key"] = "***"
        return payload

    def new_gallery_vm(self, *, store: PreferenceStorePort, sink: RenderSink) -> GalleryVM:
        return GalleryVM(
            load_images=self.uc_load_images,
            load_breeds=self.uc_load_breeds,
            store=store,
            sink=sink,
        )

    def close(self) -> None:
        """Release the HTTP session on shutdown."""
        if isinstance(self.dog_api, DogApiRestAdapter):
            self.dog_api.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _build_dog_api(self) -> DogApiPort:
        if self.offline:
            LOGGER.info("Using offline DogApiMock")
            return DogApiMock()
        return DogApiRestAdapter(
            self.settings_vm.api_base_url,
            api_key=self.settings_vm.api_key or None,
            request_timeout_s=self.settings_vm.request_timeout_s,
        )

    def _load_settings_defaults(self) -> None:
        try:
            payload = self.storage.load_user_settings()
        except (OSError, ValueError) as exc:
            LOGGER.warning("Could not load local settings defaults: %s", exc)
            return
        if payload is None:
            return
        try:
            self.settings_vm.apply_dict(payload)
        except ValueError as exc:
            LOGGER.warning("Could not apply local settings defaults: %s", exc)


__all__ = ["WebRuntime"]
