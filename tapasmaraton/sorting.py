"""Merge sort driven by a "comes before" predicate."""

from __future__ import annotations

from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")
Before = Callable[[T, T], bool]


def _merge(left: List[T], right: List[T], before: Before) -> List[T]:
    merged: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # The left item is taken only when it strictly comes first.
        if before(left[i], right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Sequence[T], before: Before) -> List[T]:
    """Return a new list of ``items`` ordered by ``before``.

    ``before(a, b)`` is true when ``a`` must come before ``b``. When it is
    false for two items, the one from the right half is placed first.
    """
    items = list(items)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return _merge(
        merge_sort(items[:middle], before),
        merge_sort(items[middle:], before),
        before,
    )


def sort_items(items: List[T], before: Before) -> None:
    """Sort the list ``items`` in place by ``before``."""
    items[:] = merge_sort(items, before)