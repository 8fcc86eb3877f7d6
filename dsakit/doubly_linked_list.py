"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class DoublyLinkedList:
    """Doubly linked list with head insertion and positional edits."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at(self._size, value)

    def _node_at(self, index: int) -> _Node:
        if index < self._size // 2 + 1:
            node = self._head
            for _ in range(index):
                assert node is not None
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                assert node is not None
                node = node.prev
        assert node is not None
        return node

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the first element."""
        node = _Node(value)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert index {index} out of range")
        if index == 0:
            self.insert_at_head(value)
            return
        previous = self._node_at(index - 1)
        following = previous.next
        node = _Node(value)
        node.prev = previous
        node.next = following
        previous.next = node
        if following is None:
            self._tail = node
        else:
            following.prev = node
        self._size += 1

    def delete_at_head(self) -> Any:
        """Remove the first element and return its value."""
        if self._head is None:
            raise IndexError("delete from empty list")
        return self.delete_at(0)

    def delete_at(self, index: int) -> Any:
        """Remove the element at ``index`` and return its value."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} does not exist")
        node = self._node_at(index)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def head_value(self) -> Any:
        """Return the value of the first element."""
        if self._head is None:
            raise IndexError("head of empty list")
        return self._head.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"