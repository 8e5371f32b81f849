"""Singly, doubly and circular linked lists with 1-based positional operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


@dataclass(eq=False)
class _DNode(Generic[T]):
    value: T
    prev: Optional["_DNode[T]"] = None
    next: Optional["_DNode[T]"] = None


def _check_position(position: int, upper: int) -> None:
    if not 1 <= position <= upper:
        raise IndexError(f"position {position} out of range 1..{upper}")


def _check_not_empty(size: int) -> None:
    if size == 0:
        raise IndexError("pop from empty list")


class SinglyLinkedList(Generic[T]):
    """A singly linked list whose positions count from 1."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int) -> _Node[T]:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def push_front(self, value: T) -> None:
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: T) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        _check_not_empty(self._size)
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> T:
        _check_not_empty(self._size)
        if self._size == 1:
            return self.pop_front()
        prev = self._node_at(self._size - 2)
        value = prev.next.value
        prev.next = None
        self._tail = prev
        self._size -= 1
        return value

    def insert(self, position: int, value: T) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        _check_position(position, self._size + 1)
        if position == 1:
            self.push_front(value)
        elif position == self._size + 1:
            self.push_back(value)
        else:
            prev = self._node_at(position - 2)
            prev.next = _Node(value, prev.next)
            self._size += 1

    def delete(self, position: int) -> T:
        """Remove and return the value at ``position``."""
        _check_position(position, self._size)
        if position == 1:
            return self.pop_front()
        if position == self._size:
            return self.pop_back()
        prev = self._node_at(position - 2)
        removed = prev.next
        prev.next = removed.next
        self._size -= 1
        return removed.value

    def find(self, value: Any) -> Optional[int]:
        """Return the position of the first occurrence of ``value``, or None."""
        for position, item in enumerate(self, start=1):
            if item == value:
                return position
        return None

    def insert_sorted(self, value: T) -> None:
        """Insert ``value`` into an ascending list, keeping it ascending."""
        if self._head is None or value < self._head.value:
            self.push_front(value)
            return
        current = self._head
        while current.next is not None and current.next.value < value:
            current = current.next
        node = _Node(value, current.next)
        current.next = node
        if current is self._tail:
            self._tail = node
        self._size += 1


class DoublyLinkedList(Generic[T]):
    """A doubly linked list whose positions count from 1."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_DNode[T]] = None
        self._tail: Optional[_DNode[T]] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int) -> _DNode[T]:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def push_front(self, value: T) -> None:
        node = _DNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: T) -> None:
        node = _DNode(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        _check_not_empty(self._size)
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def pop_back(self) -> T:
        _check_not_empty(self._size)
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.value

    def insert(self, position: int, value: T) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        _check_position(position, self._size + 1)
        if position == 1:
            self.push_front(value)
        elif position == self._size + 1:
            self.push_back(value)
        else:
            prev = self._node_at(position - 2)
            following = prev.next
            node = _DNode(value, prev, following)
            prev.next = node
            following.prev = node
            self._size += 1

    def delete(self, position: int) -> T:
        """Remove and return the value at ``position``."""
        _check_position(position, self._size)
        if position == 1:
            return self.pop_front()
        if position == self._size:
            return self.pop_back()
        node = self._node_at(position - 1)
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.value


class CircularLinkedList(Generic[T]):
    """A circular singly linked list whose positions count from 1."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        # The last node is kept; its successor is the head.
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __iter__(self) -> Iterator[T]:
        if self._tail is None:
            return
        tail = self._tail
        node = tail.next
        while True:
            yield node.value
            if node is tail:
                break
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int) -> _Node[T]:
        node = self._tail.next
        for _ in range(index):
            node = node.next
        return node

    def push_front(self, value: T) -> None:
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def push_back(self, value: T) -> None:
        self.push_front(value)
        self._tail = self._tail.next

    def pop_front(self) -> T:
        _check_not_empty(self._size)
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def pop_back(self) -> T:
        _check_not_empty(self._size)
        tail = self._tail
        if tail.next is tail:
            self._tail = None
        else:
            prev = self._node_at(self._size - 2)
            prev.next = tail.next
            self._tail = prev
        self._size -= 1
        return tail.value

    def insert(self, position: int, value: T) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        _check_position(position, self._size + 1)
        if position == 1:
            self.push_front(value)
        elif position == self._size + 1:
            self.push_back(value)
        else:
            prev = self._node_at(position - 2)
            prev.next = _Node(value, prev.next)
            self._size += 1

    def delete(self, position: int) -> T:
        """Remove and return the value at ``position``."""
        _check_position(position, self._size)
        if position == 1:
            return self.pop_front()
        if position == self._size:
            return self.pop_back()
        prev = self._node_at(position - 2)
        removed = prev.next
        prev.next = removed.next
        self._size -= 1
        return removed.value