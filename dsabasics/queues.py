"""A bounded array queue and an unbounded linked queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has reached its capacity."""


class BoundedQueue(Generic[T]):
    """A first-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._items: Deque[T] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def enqueue(self, value: T) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(value)

    def dequeue(self) -> T:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def front_index(self) -> int:
        """Return the index of the front item."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return 0

    def rear_index(self) -> int:
        """Return the index of the rear item."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return len(self._items) - 1

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedQueue(Generic[T]):
    """An unbounded first-in first-out queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node[T]] = None
        self._rear: Optional[_Node[T]] = None
        self._size = 0

    def enqueue(self, value: T) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next