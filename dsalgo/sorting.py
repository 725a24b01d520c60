"""Classic comparison sorts. Each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _sift_down(items: list[Any], size: int, index: int) -> None:
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    result = list(items)
    size = len(result)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(result, size, index)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by adjacent swaps, stopping early after a pass with no swap."""
    result = list(items)
    for done in range(len(result)):
        swapped = False
        for j in range(len(result) - done - 1):
            if result[j + 1] < result[j]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result: list[Any] = []
    for key in items:
        position = len(result)
        result.append(key)
        while position > 0 and result[position - 1] > key:
            result[position] = result[position - 1]
            position -= 1
        result[position] = key
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    start, end = low, high
    while start < end:
        while start < high and items[start] <= pivot:
            start += 1
        while items[end] > pivot:
            end -= 1
        if start < end:
            items[start], items[end] = items[end], items[start]
    items[low], items[end] = items[end], items[low]
    return end


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quick sort with the first element of each range as pivot."""
    result = list(items)
    ranges = [(0, len(result) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low >= high:
            continue
        split = _partition(result, low, high)
        ranges.append((low, split - 1))
        ranges.append((split + 1, high))
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping the smallest remaining element forward."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result