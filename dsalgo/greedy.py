"""Greedy scheduling: job sequencing with deadlines and railway platforms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def job_sequencing(deadlines: Iterable[int], profits: Iterable[int]) -> tuple[int, int]:
    """Return ``(jobs_done, total_profit)`` for unit-time jobs with deadlines.

    Jobs are taken in deadline order; a min-heap of chosen profits lets a
    more profitable job replace the cheapest one once the slots are full.
    """
    deadlines = list(deadlines)
    profits = list(profits)
    if len(deadlines) != len(profits):
        raise ValueError("deadlines and profits must have the same length")
    chosen: list[int] = []
    for deadline, profit in sorted(zip(deadlines, profits)):
        if deadline > len(chosen):
            heapq.heappush(chosen, profit)
        elif chosen and chosen[0] < profit:
            heapq.heapreplace(chosen, profit)
    return len(chosen), sum(chosen)


def min_platforms(arrivals: Iterable[int], departures: Iterable[int]) -> int:
    """Fewest platforms so that no train waits.

    A train arriving at the very time another departs needs its own platform.
    The inputs are not modified.
    """
    arrive = sorted(arrivals)
    depart = sorted(departures)
    if len(arrive) != len(depart):
        raise ValueError("arrivals and departures must have the same length")
    count = len(arrive)
    i = j = current = best = 0
    while i < count and j < count:
        if arrive[i] <= depart[j]:
            current += 1
            i += 1
        else:
            current -= 1
            j += 1
        best = max(best, current)
    return best