"""Singly linked list of values with positional insertion and deletion."""

from __future__ import annotations

import random as _random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class SinglyLinkedList:
    """Singly linked list.

    Positions are 1-based. Adding at either end needs a non-empty list;
    ``insert`` and ``delete_at`` accept only interior positions, from 2 up to
    one less than the current length.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        tail: Optional[_Node] = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    @classmethod
    def random(
        cls, count: int, rng: Optional[_random.Random] = None
    ) -> SinglyLinkedList:
        """Return a list of ``count`` random integers in 1..100; empty if ``count`` <= 0."""
        rng = rng if rng is not None else _random.Random()
        return cls(rng.randint(1, 100) for _ in range(max(count, 0)))

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node:
        for i, node in enumerate(self._nodes()):
            if i == index:
                return node
        raise IndexError(f"no node at index {index}")

    def _check_interior(self, position: int, action: str, fallback: str) -> None:
        if position == 1:
            raise IndexError(
                f"position 1 is reserved for {action} at front; use {fallback}"
            )
        if position >= self._size:
            raise IndexError(f"invalid position {position}: must be < {self._size}")
        if position < 1:
            raise IndexError(f"invalid position {position}: must be >= 1")

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        if self._head is None:
            raise IndexError("list is empty, cannot insert at front")
        self._head = _Node(value, self._head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        if self._head is None:
            raise IndexError("list is empty, cannot insert at the end")
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = _Node(value)
        self._size += 1

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the node at 1-based ``position``."""
        self._check_interior(position, "inserting", "push_front")
        previous = self._node_at(position - 2)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("list is empty, cannot delete")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("list is empty, cannot delete")
        if self._head.next is None:
            value = self._head.value
            self._head = None
            self._size -= 1
            return value
        previous = self._head
        while previous.next.next is not None:
            previous = previous.next
        value = previous.next.value
        previous.next = None
        self._size -= 1
        return value

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at 1-based ``position``."""
        self._check_interior(position, "deleting", "pop_front")
        previous = self._node_at(position - 2)
        removed = previous.next
        previous.next = removed.next
        self._size -= 1
        return removed.value

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def count(self, value: Any) -> int:
        """Return how many nodes hold ``value``."""
        return sum(1 for item in self if item == value)

    def clear(self) -> None:
        """Remove every node."""
        self._head = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SinglyLinkedList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __str__(self) -> str:
        """Render as ``a -> b -> NULL``."""
        return " -> ".join([*(str(value) for value in self), "NULL"])