"""Root logger setup for the dogview process.

Environment overrides win over the ``debug_logging`` setting:

- ``DOGVIEW_LOG_LEVEL``: level name or number (``debug``, ``WARNING``, ``10``)
- ``DOGVIEW_DEBUG`` / ``DOGVIEW_DEBUG_LOGGING``: truthy value forces DEBUG
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "DOGVIEW_LOG_LEVEL"
DEBUG_ENVS = ("DOGVIEW_DEBUG", "DOGVIEW_DEBUG_LOGGING")

# Per-request chatter from the HTTP stack; only shown when dogview itself runs at DEBUG.
_NOISY_LOGGERS = ("urllib3", "requests")

_TRUTHY = {"1", "true", "yes", "on"}


def _parse_level(text: Optional[str]) -> Optional[int]:
    cleaned = (text or "").strip()
    if not cleaned:
        return None
    if cleaned.isdigit():
        return int(cleaned)
    level = logging.getLevelName(cleaned.upper())
    return level if isinstance(level, int) else None


def _env_level() -> Optional[int]:
    explicit = os.getenv(LEVEL_ENV)
    if explicit:
        return _parse_level(explicit) or logging.INFO
    for name in DEBUG_ENVS:
        if (os.getenv(name) or "").strip().lower() in _TRUTHY:
            return logging.DEBUG
    return None


def _set_level(level: int) -> int:
    logging.getLogger().setLevel(level)
    noisy = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy)
    return level


def configure_root(default_level: int | str = logging.INFO) -> int:
    """Install the compact console format once and apply the effective level.

    Returns:
        The level now set on the root logger.
    """
    if isinstance(default_level, str):
        fallback = _parse_level(default_level) or logging.INFO
    else:
        fallback = int(default_level)
    level = _env_level() or fallback
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    return _set_level(level)


def apply_gui_preferences(debug_enabled: bool) -> int:
    """Switch between INFO and DEBUG from settings unless the env pins a level."""
    env_level = _env_level()
    if env_level is not None:
        return _set_level(env_level)
    return _set_level(logging.DEBUG if debug_enabled else logging.INFO)


def level_name(level: int) -> str:
    return logging.getLevelName(level)


def env_requests_debug() -> bool:
    """True when the environment alone already asks for DEBUG output."""
    env_level = _env_level()
    return env_level is not None and env_level <= logging.DEBUG
