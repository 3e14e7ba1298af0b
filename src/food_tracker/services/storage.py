"""Key-value storage abstractions."""

from dataclasses import dataclass
from typing import Protocol


class KeyValueStore(Protocol):
    """Storage interface for string values addressed by key."""

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    def delete(self, key: str) -> None:
        """Remove a value; missing keys are ignored."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store that forgets everything on restart."""

    _values: dict[str, str]

    def __init__(self) -> None:
        self._values = {}

    def get(self, key: str) -> str | None:
        """Return the value for a key."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value for a key."""
        self._values[key] = value

    def delete(self, key: str) -> None:
        """Drop a key if it exists."""
        self._values.pop(key, None)
