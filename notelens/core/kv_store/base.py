"""
Base interface for key-value storage.

Holds small pieces of client state, such as when advice was last shown.
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract base class for key-value store implementations."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Retrieve a value.

        Args:
            key: Key to look up

        Returns:
            Stored value or None if the key is absent
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous one.

        Args:
            key: Key to write
            value: Value to store
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key. Missing keys are ignored.

        Args:
            key: Key to remove
        """
        pass
