"""Key-value store persisted as a flat JSON object on disk."""

import json
from pathlib import Path

from notelens.core.kv_store.base import KeyValueStore
from notelens.utils import StoreError, get_logger

logger = get_logger(__name__)


class JSONFileKeyValueStore(KeyValueStore):
    """
    File-backed store.

    The whole object is read on every access and rewritten on every
    change; it is meant for a handful of keys. The file and its parent
    directory are created on first write.
    """

    def __init__(self, path: str | Path):
        """
        Initialize JSON file store.

        Args:
            path: Location of the JSON file
        """
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}", context={"path": str(self.path)}) from e

        if not isinstance(data, dict):
            raise StoreError(
                f"Expected a JSON object in {self.path}", context={"path": str(self.path)}
            )
        return {str(k): str(v) for k, v in data.items()}

    def _save(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
        except OSError as e:
            raise StoreError(f"Failed to write {self.path}: {e}", context={"path": str(self.path)}) from e

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)
        logger.debug(f"Stored {key} in {self.path}")

    def delete(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)
