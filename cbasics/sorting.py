"""Classic sorting algorithms; each returns a new sorted list."""

from __future__ import annotations

import random
from collections.abc import Iterable
from itertools import pairwise


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))


def shuffle(values: Iterable[int], rng: random.Random | None = None) -> list[int]:
    """Return a shuffled copy of ``values`` using ``rng`` (the module generator by default)."""
    rng = rng or random.Random()
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        j = i + rng.randrange(n - i)
        items[i], items[j] = items[j], items[i]
    return items


def bogo_sort(values: Iterable[int], rng: random.Random | None = None) -> list[int]:
    """Return a sorted copy of ``values`` by shuffling until it happens to be ordered."""
    rng = rng or random.Random()
    items = list(values)
    while not is_sorted(items):
        items = shuffle(items, rng)
    return items


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using bubble sort."""
    items = list(values)
    n = len(items)
    for passes in range(n - 1):
        for j in range(n - passes - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def counting_sort(values: Iterable[int], max_value: int = 10) -> list[int]:
    """Return a stable sorted copy of ``values``, all within ``0..max_value``.

    Raises ValueError for a value outside that range.
    """
    items = list(values)
    for value in items:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} outside range 0..{max_value}")
    counts = [0] * (max_value + 1)
    for value in items:
        counts[value] += 1
    for i in range(1, max_value + 1):
        counts[i] += counts[i - 1]
    result = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        result[counts[value]] = value
    return result


def _sift_down(heap: list[int], root: int, size: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using heap sort."""
    heap = list(values)
    n = len(heap)
    for start in range(n // 2 - 1, -1, -1):
        _sift_down(heap, start, n)
    for end in range(n - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, 0, end)
    return heap


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using quicksort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` by moving each maximum to the end."""
    items = list(values)
    for size in range(len(items), 1, -1):
        index = max(range(size), key=items.__getitem__)
        items[index], items[size - 1] = items[size - 1], items[index]
    return items