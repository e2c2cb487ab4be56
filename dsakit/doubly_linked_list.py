"""Doubly linked list with insertion and deletion at both ends and by position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class _Node:
    value: Any
    prev: Optional[_Node] = None
    next: Optional[_Node] = None


class DoublyLinkedList:
    """Doubly linked list.

    Positions are 1-based. ``push_front`` works on an empty list; ``append``,
    ``insert_at`` and the deletions need at least one node.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self._link_after(self._tail, value)

    def _require_nonempty(self) -> None:
        if self._head is None:
            raise IndexError("list is empty")

    def _link_after(self, previous: Optional[_Node], value: Any) -> None:
        node = _Node(value, prev=previous)
        node.next = self._head if previous is None else previous.next
        if previous is None:
            self._head = node
        else:
            previous.next = node
        if node.next is None:
            self._tail = node
        else:
            node.next.prev = node
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def _nodes(self, reverse: bool = False) -> Iterator[_Node]:
        node = self._tail if reverse else self._head
        while node is not None:
            yield node
            node = node.prev if reverse else node.next

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        self._link_after(None, value)

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node."""
        self._require_nonempty()
        self._link_after(self._tail, value)

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the node at 1-based ``position``.

        ``position`` may be one past the end, which appends.
        """
        self._require_nonempty()
        if not 1 <= position <= self._size + 1:
            raise IndexError(
                f"invalid position {position}: must be between 1 and {self._size + 1}"
            )
        previous = None
        if position > 1:
            previous = next(
                node for index, node in enumerate(self._nodes(), 2) if index == position
            )
        self._link_after(previous, value)

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        self._require_nonempty()
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        self._require_nonempty()
        return self._unlink(self._tail)

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        self._require_nonempty()
        node = next((node for node in self._nodes() if node.value == value), None)
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        self._unlink(node)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes(reverse=True))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoublyLinkedList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __str__(self) -> str:
        """Render as ``a -> b -> NULL``."""
        return " -> ".join([*(str(value) for value in self), "NULL"])