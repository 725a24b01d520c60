"""Array problems: stacks, sliding windows, two pointers and dynamic programming."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Largest rectangle that fits under a histogram."""
    heights = list(heights)
    count = len(heights)
    left = [-1] * count
    right = [count] * count

    stack: list[int] = []
    for index, height in enumerate(heights):
        while stack and heights[stack[-1]] >= height:
            stack.pop()
        if stack:
            left[index] = stack[-1]
        stack.append(index)

    stack.clear()
    for index in reversed(range(count)):
        while stack and heights[stack[-1]] >= heights[index]:
            stack.pop()
        if stack:
            right[index] = stack[-1]
        stack.append(index)

    areas = ((r - l - 1) * h for l, r, h in zip(left, right, heights))
    return max(0, *areas)


def longest_subarray_at_most(arr: Sequence[int], k: int) -> int:
    """Length of the longest contiguous run whose sum is at most ``k``.

    Exact for non-negative values, where a shrinking window is valid.
    """
    arr = list(arr)
    start = 0
    total = 0
    best = 0
    for end, value in enumerate(arr, 1):
        total += value
        while total > k and start < end:
            total -= arr[start]
            start += 1
        best = max(best, end - start)
    return best


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dims[i] x dims[i + 1]``.
    """
    dims = list(dims)
    count = len(dims) - 1
    if count < 1:
        raise ValueError("at least two dimensions are needed")
    cost = [[0] * count for _ in range(count)]
    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][split] + cost[split + 1][j] + dims[i] * dims[split + 1] * dims[j + 1]
                for split in range(i, j)
            )
    return cost[0][count - 1]


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive values."""
    nums = list(nums)
    if not 1 <= k <= len(nums):
        raise ValueError("window size must be between 1 and the number of values")
    window: deque[int] = deque()
    maxima: list[int] = []
    for index, value in enumerate(nums):
        while window and window[-1] < value:
            window.pop()
        window.append(value)
        if index >= k - 1:
            maxima.append(window[0])
            if nums[index - k + 1] == window[0]:
                window.popleft()
    return maxima


def sort_012(nums: Iterable[int]) -> list[int]:
    """Sort values drawn from {0, 1, 2} in one pass (Dutch national flag)."""
    result = list(nums)
    if any(value not in (0, 1, 2) for value in result):
        raise ValueError("values must be 0, 1 or 2")
    low = mid = 0
    high = len(result) - 1
    while mid <= high:
        if result[mid] == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif result[mid] == 1:
            mid += 1
        else:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
    return result


def _subarrays_with_at_most(nums: list[int], k: int) -> int:
    if k <= 0:
        return 0
    seen: Counter[int] = Counter()
    start = 0
    total = 0
    for end, value in enumerate(nums):
        seen[value] += 1
        while len(seen) > k:
            outgoing = nums[start]
            seen[outgoing] -= 1
            if not seen[outgoing]:
                del seen[outgoing]
            start += 1
        total += end - start + 1
    return total


def count_subarrays_with_k_distinct(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays holding exactly ``k`` distinct values."""
    nums = list(nums)
    return _subarrays_with_at_most(nums, k) - _subarrays_with_at_most(nums, k - 1)


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Largest sum of a contiguous subarray; the empty subarray counts as 0."""
    best = 0
    current = 0
    for value in nums:
        current = current + value if current >= 0 else value
        best = max(best, current)
    return best


def majority_element(nums: Iterable[int]) -> int:
    """Boyer-Moore vote; the answer is the majority only if one exists."""
    candidate = None
    count = 0
    empty = True
    for value in nums:
        empty = False
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    if empty:
        raise ValueError("no elements to vote on")
    return candidate