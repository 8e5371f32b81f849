"""Array-backed and linked stacks, plus the stock span computation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class Stack(Generic[T]):
    """A stack kept in a list, optionally limited to ``capacity`` items."""

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._items: List[T] = []

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def push(self, value: T) -> None:
        if self._capacity is not None and len(self._items) >= self._capacity:
            raise StackFullError("stack overflow")
        self._items.append(value)

    def pop(self) -> T:
        if not self._items:
            raise StackEmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise StackEmptyError("stack underflow")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity!r})"


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedStack(Generic[T]):
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0

    def push(self, value: T) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> T:
        if self._head is None:
            raise StackEmptyError("stack is empty")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self) -> T:
        if self._head is None:
            raise StackEmptyError("stack is empty")
        return self._head.value

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None


def stock_span(prices: Sequence[float]) -> List[int]:
    """Return, for each day, how many consecutive days up to it had a price not above it."""
    spans: List[int] = []
    higher: List[int] = []
    for i, price in enumerate(prices):
        while higher and prices[higher[-1]] <= price:
            higher.pop()
        spans.append(i - higher[-1] if higher else i + 1)
        higher.append(i)
    return spans