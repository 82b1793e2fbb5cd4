from __future__ import annotations

import json
import os
import tempfile
from typing import Any, Dict, Optional


class StorageLocal:
    """Local filesystem storage for the optional ``user_settings.json``."""

    SETTINGS_FILE = "user_settings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    def save_user_settings(self, settings: Dict[str, Any]) -> None:
        text = json.dumps(settings, ensure_ascii=False, indent=2, sort_keys=True)
        self._write_atomic(self._settings_path(), text, prefix="user_settings_")

    def load_user_settings(self) -> Optional[Dict[str, Any]]:
        path = self._settings_path()
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object.")
        return data

    def _settings_path(self) -> str:
        return os.path.join(self.root, self.SETTINGS_FILE)

    def _write_atomic(self, path: str, text: str, *, prefix: str) -> None:
        os.makedirs(self.root, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=prefix, suffix=".tmp", dir=self.root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
