from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..domain.ports import DEFAULT_API_BASE
from ..utils.logging import env_requests_debug

ENV_API_BASE = "DOGVIEW_API_BASE"
ENV_API_KEY = "DOGVIEW_API_KEY"
ENV_REQUEST_TIMEOUT = "DOGVIEW_REQUEST_TIMEOUT_S"


@dataclass
class SettingsConfig:
    """Typed runtime settings that persist via StorageLocal."""

    api_base_url: str = DEFAULT_API_BASE
    api_key: str = ""
    request_timeout_s: float = 10
    debug_logging: bool = False


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps app settings and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig(debug_logging=_default_debug_logging())

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def api_base_url(self) -> str:
        return self.config.api_base_url

    @api_base_url.setter
    def api_base_url(self, value: str) -> None:
        self.config = replace(self.config, api_base_url=self._coerce_url(value))

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @api_key.setter
    def api_key(self, value: Optional[str]) -> None:
        self.config = replace(self.config, api_key=self._coerce_optional_str(value))

    @property
    def request_timeout_s(self) -> float:
        return self.config.request_timeout_s

    @request_timeout_s.setter
    def request_timeout_s(self, value: Any) -> None:
        self.config = replace(self.config, request_timeout_s=self._coerce_timeout(value))

    @property
    def debug_logging(self) -> bool:
        return self.config.debug_logging

    @debug_logging.setter
    def debug_logging(self, value: Any) -> None:
        self.config = replace(self.config, debug_logging=self._coerce_bool(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = set(SettingsConfig.__annotations__.keys())
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for key in SettingsConfig.__annotations__.keys():
            if key in payload:
                updates[key] = self._coerce_config_value(key, payload[key])
        if updates:
            self.config = replace(self.config, **updates)

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Override settings from ``DOGVIEW_*`` environment variables."""
        env = os.environ if environ is None else environ
        if env.get(ENV_API_BASE):
            self.api_base_url = env[ENV_API_BASE]
        if env.get(ENV_API_KEY):
            self.api_key = env[ENV_API_KEY]
        if env.get(ENV_REQUEST_TIMEOUT):
            self.request_timeout_s = env[ENV_REQUEST_TIMEOUT]

    def to_dict(self) -> dict:
        return asdict(self.config)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "api_base_url":
            return self._coerce_url(raw)
        if key == "api_key":
            return self._coerce_optional_str(raw)
        if key == "request_timeout_s":
            return self._coerce_timeout(raw)
        if key == "debug_logging":
            return self._coerce_bool(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_url(value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("api_base_url must be a string.")
        text = value.strip().rstrip("/")
        if not text:
            return DEFAULT_API_BASE
        if not (text.startswith("http://") or text.startswith("https://")):
            raise ValueError("api_base_url must start with http:// or https://.")
        return text

    @staticmethod
    def _coerce_optional_str(value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_timeout(value: Any) -> float:
        if isinstance(value, bool):
            raise ValueError("request_timeout_s must be a number.")
        if isinstance(value, (int, float)):
            coerced = float(value)
        elif isinstance(value, str):
            try:
                coerced = float(value.strip())
            except ValueError as exc:
                raise ValueError("request_timeout_s must be a number.") from exc
        else:
            raise ValueError("request_timeout_s must be a number.")
        if coerced <= 0:
            raise ValueError("request_timeout_s must be positive.")
        return coerced


def default_settings_payload() -> dict:
    """Return a fresh snapshot containing the default settings payload."""
    return SettingsVM().to_dict()
