"""Merge sort and quicksort returning new sorted lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    lhs, rhs = deque(left), deque(right)
    merged: list[Any] = []
    while lhs and rhs:
        if lhs[0] < rhs[0]:
            merged.append(lhs.popleft())
        else:
            merged.append(rhs.popleft())
    merged.extend(lhs)
    merged.extend(rhs)
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted ascending by merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def quicksort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted ascending by quicksort with the last element as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot = result[end]
        boundary = start
        for j in range(start, end):
            if result[j] < pivot:
                result[boundary], result[j] = result[j], result[boundary]
                boundary += 1
        result[boundary], result[end] = result[end], result[boundary]
        pending.append((boundary + 1, end))
        pending.append((start, boundary - 1))
    return result