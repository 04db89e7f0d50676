"""Key/value store interface consumed by RecordStore."""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """Durable string-keyed storage holding one opaque string per key."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryKeyVal:
    """In-process KeyValueStore. Contents live as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"MemoryKeyVal values must be str, got {type(value).__name__}")
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
