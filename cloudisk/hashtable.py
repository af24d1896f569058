"""Fixed-capacity hash table with open addressing and linear probing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["CAPACITY", "MAX_KEY_LENGTH", "HashTable", "hash_key"]

CAPACITY = 100
MAX_KEY_LENGTH = 49


def hash_key(key: str) -> int:
    """Return the slot index for *key* (a times-33 string hash)."""
    value = 0
    for byte in key.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        value = (value * 33 + char) & 0xFFFFFFFF
    return value % CAPACITY


class HashTable:
    """Map of string keys to values, holding at most ``CAPACITY`` entries."""

    def __init__(self) -> None:
        self._slots: list[tuple[str, Any] | None] = [None] * CAPACITY
        self._size = 0

    def _probe(self, key: str) -> Iterator[int]:
        start = hash_key(key)
        for step in range(CAPACITY):
            yield (start + step) % CAPACITY

    def _locate(self, key: str) -> int | None:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot[0] == key:
                return index
        return None

    def insert(self, key: str, value: Any) -> None:
        """Store *value* under *key*, replacing any previous value."""
        if len(key.encode("utf-8")) > MAX_KEY_LENGTH:
            raise ValueError(f"key longer than {MAX_KEY_LENGTH} bytes: {key!r}")
        if value is None:
            raise ValueError("value must not be None")
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                self._slots[index] = (key, value)
                self._size += 1
                return
            if slot[0] == key:
                self._slots[index] = (key, value)
                return
        raise OverflowError("hash table is full")

    def find(self, key: str) -> Any:
        """Return the value stored under *key*, or None."""
        index = self._locate(key)
        return None if index is None else self._slots[index][1]

    def erase(self, key: str) -> None:
        """Remove *key* if present; a missing key is ignored."""
        index = self._locate(key)
        if index is None:
            return
        self._slots[index] = None
        self._size -= 1
        # Re-seat the rest of the cluster so later lookups still find it.
        following = (index + 1) % CAPACITY
        while (entry := self._slots[following]) is not None:
            self._slots[following] = None
            self._size -= 1
            self.insert(*entry)
            following = (following + 1) % CAPACITY

    def items(self) -> list[tuple[str, Any]]:
        """Return the stored pairs in slot order."""
        return [slot for slot in self._slots if slot is not None]

    def dump(self) -> str:
        """Return a printable listing of the table's contents."""
        lines = ["HashTable's content: \n"]
        lines.extend(f"key={key}, value={value}\n" for key, value in self.items())
        lines.append("\n")
        return "".join(lines)

    def clear(self) -> None:
        """Remove every entry."""
        self._slots = [None] * CAPACITY
        self._size = 0

    def __len__(self) -> int:
        return self._size