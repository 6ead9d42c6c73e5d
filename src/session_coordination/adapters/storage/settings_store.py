"""Key/value settings stores."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from session_coordination.domain.contracts.settings_store import SettingsStoreProtocol

logger = logging.getLogger(__name__)


class InMemorySettingsStore(SettingsStoreProtocol):
    """Process-local store; values are lost on exit."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileSettingsStore(SettingsStoreProtocol):
    """Store persisted as a flat JSON object on disk.

    A missing, unreadable or corrupt file is treated as empty. Write failures
    are logged and the value is kept in memory for the rest of the process.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the store and load existing values.

        Args:
            path: Location of the JSON file (created on first write).
        """
        self.path = Path(path)
        self._values: dict[str, str] = self._load()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read settings file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Settings file {self.path} is not a JSON object, ignoring it")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self._values, f, indent=2, sort_keys=True)
            tmp_path.replace(self.path)
        except OSError as e:
            logger.error(f"Failed to persist settings to {self.path}: {e}", exc_info=True)
