"""Searching sorted and unsorted sequences."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def interpolation_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or None if absent.

    The probe position is estimated by linear interpolation between the
    values at the ends of the current range, truncated towards zero.
    """
    low, high = 0, len(values) - 1
    while low <= high and values[low] <= target <= values[high]:
        if low == high:
            return low if values[low] == target else None
        span = values[high] - values[low]
        if span == 0:
            # Every value in the range equals the target.
            return low
        pos = low + int((high - low) / span * (target - values[low]))
        if values[pos] == target:
            return pos
        if values[pos] < target:
            low = pos + 1
        else:
            high = pos - 1
    return None


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first occurrence of ``target``, or None if absent."""
    return next((i for i, value in enumerate(values) if value == target), None)