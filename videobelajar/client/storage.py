"""File-backed key/value store for persisting the client session between runs."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


class LocalStorage:
    """
    String keys and string values kept in one JSON file.

    The file is re-read on every access so separate instances pointing at the
    same path see each other's writes.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def _load(self) -> dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, str]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

    def clear(self) -> None:
        self._save({})

    def get_json(self, key: str) -> Any:
        """Decode a value stored with set_json; None when missing or not valid JSON."""
        raw = self.get_item(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return None

    def set_json(self, key: str, value: Any) -> None:
        self.set_item(key, json.dumps(value))
