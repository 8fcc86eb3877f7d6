"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList:
    """Singly linked list with head insertion and positional edits."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.insert_at_head(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError("list index out of range")

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the first element."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert index {index} out of range")
        if index == 0:
            self.insert_at_head(value)
            return
        previous = self._node_at(index - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def delete_at_head(self) -> Any:
        """Remove the first element and return its value."""
        if self._head is None:
            raise IndexError("delete from empty list")
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.value

    def delete_at(self, index: int) -> Any:
        """Remove the element at ``index`` and return its value."""
        if not 0 <= index < self._size:
            raise IndexError(f"delete index {index} out of range")
        if index == 0:
            return self.delete_at_head()
        previous = self._node_at(index - 1)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        self._size -= 1
        return removed.value

    def insert_after_value(self, target: Any, value: Any) -> None:
        """Insert ``value`` right after the first element equal to ``target``."""
        if self._head is None:
            raise ValueError("list is empty")
        for node in self._nodes():
            if node.value == target:
                node.next = _Node(value, node.next)
                self._size += 1
                return
        raise ValueError(f"{target!r} is not in list")

    def search(self, value: Any) -> int:
        """Return the index of the first element equal to ``value``, or -1."""
        for index, node in enumerate(self._nodes()):
            if node.value == value:
                return index
        return -1

    def reverse_values(self) -> list[Any]:
        """Return the values from last to first."""
        values = list(self)
        values.reverse()
        return values

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"