"""In-place sorting algorithms: heap sort, insertion sort and quicksort."""

from __future__ import annotations

from typing import Any, MutableSequence, TypeVar

T = TypeVar("T")
Seq = MutableSequence[Any]


def _sift_down(data: Seq, root: int, end: int) -> None:
    """Restore the max-heap property below *root* within ``data[:end]``."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < end and data[left] > data[largest]:
            largest = left
        if right < end and data[right] > data[largest]:
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def heap_sort(data: Seq) -> Seq:
    """Sort *data* in place in ascending order using heap sort and return it."""
    n = len(data)
    for start in range(n // 2 - 1, -1, -1):
        _sift_down(data, start, n)
    for end in range(n - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, 0, end)
    return data


def insertion_sort(data: Seq) -> Seq:
    """Sort *data* in place in ascending order using insertion sort and return it."""
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and key < data[j]:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
    return data


def _partition(data: Seq, low: int, high: int) -> tuple[int, int]:
    """Partition ``data[low:high + 1]`` around its middle element."""
    pivot = data[low + (high - low) // 2]
    i, j = low, high
    while i <= j:
        while data[i] < pivot:
            i += 1
        while data[j] > pivot:
            j -= 1
        if i <= j:
            data[i], data[j] = data[j], data[i]
            i += 1
            j -= 1
    return i, j


def quicksort(data: Seq) -> Seq:
    """Sort *data* in place with a middle-pivot quicksort and return it."""
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        if high <= low:
            continue
        i, j = _partition(data, low, high)
        pending.append((low, j))
        pending.append((i, high))
    return data