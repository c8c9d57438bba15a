"""In-process key-value store."""

from notelens.core.kv_store.base import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed store. State lives as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
