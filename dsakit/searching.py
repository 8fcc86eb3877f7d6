"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

NOT_FOUND = -1


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in ascending ``values``, or ``NOT_FOUND``."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return NOT_FOUND


def contains_sorted(values: Iterable[Any], target: Any) -> bool:
    """Return whether ``target`` occurs in ``values``, using a sorted copy."""
    return binary_search(sorted(values), target) != NOT_FOUND


def linear_search(values: Iterable[Any], target: Any) -> int:
    """Return the first index of ``target`` in ``values``, or ``NOT_FOUND``."""
    return next(
        (index for index, value in enumerate(values) if value == target), NOT_FOUND
    )


def find_all(values: Iterable[Any], target: Any) -> list[int]:
    """Return every index at which ``target`` occurs, in ascending order."""
    return [index for index, value in enumerate(values) if value == target]