"""Stacks backed by a growable array, a bounded array and a linked list."""

from __future__ import annotations

from typing import Any

from dsakit.doubly_linked_list import DoublyLinkedList

MAX_SIZE = 500


class StackEmptyError(IndexError):
    """Raised when reading or removing from an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no room left."""


class ArrayStack:
    """Stack over an array whose capacity doubles when it fills up."""

    def __init__(self) -> None:
        self._slots: list[Any] = [None]
        self._size = 0

    def _grow(self) -> None:
        grown: list[Any] = [None] * (2 * len(self._slots))
        grown[: len(self._slots)] = self._slots
        self._slots = grown

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self._size == len(self._slots):
            self._grow()
        self._slots[self._size] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove the top value and return it."""
        if self._size == 0:
            raise StackEmptyError("stack is empty")
        self._size -= 1
        value = self._slots[self._size]
        self._slots[self._size] = None
        return value

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._size == 0:
            raise StackEmptyError("stack is empty")
        return self._slots[self._size - 1]

    def capacity(self) -> int:
        """Return the number of slots currently allocated."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._size


class BoundedStack:
    """Stack that holds at most ``max_size`` values."""

    def __init__(self, max_size: int = MAX_SIZE) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) >= self.max_size:
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove the top value and return it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack:
    """Stack whose top is the head of a doubly linked list."""

    def __init__(self) -> None:
        self._list = DoublyLinkedList()

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._list.insert_at_head(value)

    def pop(self) -> Any:
        """Remove the top value and return it."""
        if not self._list:
            raise StackEmptyError("stack is empty")
        return self._list.delete_at_head()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._list:
            raise StackEmptyError("stack is empty")
        return self._list.head_value()

    def __len__(self) -> int:
        return len(self._list)