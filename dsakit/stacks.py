"""LIFO stacks: a bounded array stack and an unbounded linked stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from .queues import DEFAULT_CAPACITY, _Container, _Node, _walk


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when popping or peeking an empty stack."""


class ArrayStack(_Container):
    """Stack with a fixed capacity."""

    _overflow = StackOverflow
    _underflow = StackUnderflow

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity)
        self._items: list[Any] = []

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: Any) -> None:
        self._need_room("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        self._need_item("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        self._need_item("stack underflow, cannot peek")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)


class LinkedStack:
    """Unbounded stack on singly linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: Any) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise StackUnderflow("stack underflow")
        value = self._top.value
        self._top = self._top.next
        self._size -= 1
        return value

    def peek(self) -> Any:
        if self._top is None:
            raise StackUnderflow("stack underflow, cannot peek")
        return self._top.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        return _walk(self._top)