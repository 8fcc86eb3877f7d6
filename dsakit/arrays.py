"""Small array algorithms: prefix sums, counting and positional edits."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import accumulate, groupby
from typing import Any


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Return ``[0, v1, v1+v2, ...]`` so that range sums take constant time."""
    return list(accumulate(values, initial=0))


def range_sum(prefix: Sequence[int], left: int, right: int) -> int:
    """Return the sum of elements ``left`` to ``right``, 1-based and inclusive."""
    if not 1 <= left <= right < len(prefix):
        raise IndexError(f"range [{left}, {right}] out of bounds")
    return prefix[right] - prefix[left - 1]


def letter_counts(text: str) -> dict[str, int]:
    """Count lowercase letters in ``text``, in alphabetical order."""
    invalid = [char for char in text if not "a" <= char <= "z"]
    if invalid:
        raise ValueError(f"not a lowercase letter: {invalid[0]!r}")
    counts = Counter(text)
    return {letter: counts[letter] for letter in sorted(counts)}


def count_elements_with_successor(values: Iterable[int]) -> int:
    """Count the elements ``x`` for which ``x + 1`` also occurs."""
    counts = Counter(values)
    return sum(count for value, count in counts.items() if value + 1 in counts)


def count_turning_points(values: Iterable[int]) -> int:
    """Count elements left after merging runs of equal values and dropping
    every middle element of a strictly monotone triple."""
    deduped = [value for value, _ in groupby(values)]
    monotone = sum(
        1
        for a, b, c in zip(deduped, deduped[1:], deduped[2:])
        if a < b < c or a > b > c
    )
    return len(deduped) - monotone


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values ``n <= 1`` return ``n``."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def insert_at(items: MutableSequence[Any], index: int, value: Any) -> None:
    """Insert ``value`` into ``items`` so that it sits at ``index``."""
    if not 0 <= index <= len(items):
        raise IndexError(f"insert index {index} out of range")
    items.insert(index, value)


def delete_at(items: MutableSequence[Any], index: int) -> Any:
    """Remove the element at ``index`` from ``items`` and return it."""
    if not 0 <= index < len(items):
        raise IndexError(f"delete index {index} out of range")
    return items.pop(index)