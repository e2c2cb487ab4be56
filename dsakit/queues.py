"""Bounded and unbounded queues: linear, circular, double-ended, priority and linked."""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_CAPACITY = 5


class QueueOverflow(Exception):
    """Raised when a value is added to a queue that has no room left."""


class QueueUnderflow(Exception):
    """Raised when a value is read or removed from an empty queue."""


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


def _walk(node: Optional[_Node]) -> Iterator[Any]:
    while node is not None:
        yield node.value
        node = node.next


class _Container:
    """Capacity bookkeeping shared by the fixed-size containers.

    Subclasses provide ``is_full`` and ``is_empty``.
    """

    _overflow: type[Exception] = QueueOverflow
    _underflow: type[Exception] = QueueUnderflow

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity

    def _need_room(self, message: str) -> None:
        if self.is_full():  # type: ignore[attr-defined]
            raise self._overflow(message)

    def _need_item(self, message: str) -> None:
        if self.is_empty():  # type: ignore[attr-defined]
            raise self._underflow(message)


class LinearQueue(_Container):
    """Array queue whose slots are never reused: once ``capacity`` values have
    been enqueued it stays full, even after they are dequeued."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity)
        self._items: list[Any] = []
        self._front = 0

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return self._front >= len(self._items)

    def enqueue(self, value: Any) -> None:
        self._need_room("queue overflow")
        self._items.append(value)

    def dequeue(self) -> Any:
        self._need_item("queue underflow")
        value = self._items[self._front]
        self._front += 1
        return value

    def peek(self) -> Any:
        self._need_item("queue is empty")
        return self._items[self._front]

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items[self._front :])


class _Ring(_Container):
    """Circular slot array; an empty ring has ``front == -1`` unless overridden."""

    def __init__(self, capacity: int, front: int, rear: int) -> None:
        super().__init__(capacity)
        self._slots: list[Any] = [None] * capacity
        self._front = front
        self._rear = rear

    def _advance(self, index: int, step: int = 1) -> int:
        return (index + step) % self.capacity

    def _value_at(self, index: int, message: str) -> Any:
        self._need_item(message)
        return self._slots[index]

    def peek(self) -> Any:
        return self._value_at(self._front, "queue is empty")

    def __len__(self) -> int:
        if self._front == -1:
            return 0
        return (self._rear - self._front) % self.capacity + 1

    def __iter__(self) -> Iterator[Any]:
        for offset in range(len(self)):
            yield self._slots[self._advance(self._front, offset)]


class CircularQueue(_Ring):
    """Circular array queue that tracks emptiness with a sentinel front index."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity, -1, -1)

    def is_full(self) -> bool:
        return self._advance(self._rear) == self._front

    def is_empty(self) -> bool:
        return self._front == -1

    def enqueue(self, value: Any) -> None:
        self._need_room("queue overflow")
        if self._front == -1:
            self._front = 0
        self._rear = self._advance(self._rear)
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        value = self._value_at(self._front, "queue underflow")
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front = self._advance(self._front)
        return value

    def peek(self) -> Any:
        return self._value_at(self._front, "queue is empty")


class CountedCircularQueue(_Ring):
    """Circular array queue that tracks its size with an element count."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity, 0, -1)
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def is_full(self) -> bool:
        return self._count == self.capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def enqueue(self, value: Any) -> None:
        self._need_room("queue overflow")
        self._rear = self._advance(self._rear)
        self._slots[self._rear] = value
        self._count += 1

    def dequeue(self) -> Any:
        value = self._value_at(self._front, "queue underflow")
        self._front = self._advance(self._front)
        self._count -= 1
        return value

    def peek(self) -> Any:
        return self._value_at(self._front, "queue is empty")


class ArrayDeque(_Ring):
    """Fixed-capacity double-ended queue on a circular array."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity, -1, -1)

    def is_empty(self) -> bool:
        return self._front == -1 and self._rear == -1

    def is_full(self) -> bool:
        return (
            self._front == 0 and self._rear == self.capacity - 1
        ) or self._front == self._rear + 1

    def _place_first(self, value: Any) -> bool:
        if not self.is_empty():
            return False
        self._front = self._rear = 0
        self._slots[0] = value
        return True

    def push_front(self, value: Any) -> None:
        self._need_room(f"deque is full, cannot insert {value!r} at front")
        if not self._place_first(value):
            self._front = self._advance(self._front, -1)
            self._slots[self._front] = value

    def push_back(self, value: Any) -> None:
        self._need_room(f"deque is full, cannot insert {value!r} at rear")
        if not self._place_first(value):
            self._rear = self._advance(self._rear)
            self._slots[self._rear] = value

    def _take(self, index: int, message: str) -> tuple[Any, bool]:
        value = self._value_at(index, message)
        last = self._front == self._rear
        if last:
            self._front = self._rear = -1
        return value, last

    def pop_front(self) -> Any:
        value, last = self._take(self._front, "deque is empty, cannot delete from front")
        if not last:
            self._front = self._advance(self._front)
        return value

    def pop_back(self) -> Any:
        value, last = self._take(self._rear, "deque is empty, cannot delete from rear")
        if not last:
            self._rear = self._advance(self._rear, -1)
        return value

    def front(self) -> Any:
        return self._value_at(self._front, "deque is empty")

    def back(self) -> Any:
        return self._value_at(self._rear, "deque is empty")


class PriorityQueue(_Container):
    """Bounded priority queue kept as an array in descending order.

    The smallest value has the highest priority and sits at the end of the
    array, so ``peek`` and ``pop`` work on it; ``pop_largest`` takes the head.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity)
        self._items: list[Any] = []

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def insert(self, value: Any) -> None:
        self._need_room("priority queue is full")
        index = bisect.bisect_right(self._items, -value, key=lambda item: -item)
        self._items.insert(index, value)

    def peek(self) -> Any:
        self._need_item("priority queue is empty")
        return self._items[-1]

    def pop(self) -> Any:
        self._need_item("priority queue is empty")
        return self._items.pop()

    def pop_largest(self) -> Any:
        self._need_item("priority queue is empty")
        return self._items.pop(0)

    def arrangement(self) -> list[Any]:
        """Return the values as they are stored: largest first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate in order of priority, smallest value first."""
        return reversed(self._items)


class LinkedQueue:
    """Unbounded FIFO queue on singly linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: Any) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        if self._front is None:
            raise QueueUnderflow("queue underflow")
        value = self._front.value
        self._front = self._front.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return value

    def peek(self) -> Any:
        if self._front is None:
            raise QueueUnderflow("queue is empty")
        return self._front.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._front)