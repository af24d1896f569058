"""Singly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["LinkedList"]


@dataclass
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list with appends at the tail."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def append(self, value: Any) -> None:
        """Add *value* at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, target: Any) -> bool:
        """Remove the first node equal to *target*; return whether one was found."""
        previous: _Node | None = None
        node = self._head
        while node is not None:
            if node.value == target:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return True
            previous, node = node, node.next
        return False

    def clear(self) -> None:
        """Drop every node."""
        self._head = self._tail = None
        self._size = 0

    def dump(self) -> str:
        """Return the values one per line."""
        return "".join(f"{value}\n" for value in self)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size