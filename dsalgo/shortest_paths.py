"""Single- and all-pairs shortest path algorithms.

Unreachable nodes have distance ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def bellman_ford(n: int, edges: Sequence[tuple[int, int, int]], src: int) -> list[float]:
    """Distances from ``src`` over directed ``(u, v, weight)`` edges.

    Raises NegativeCycleError if a reachable negative cycle exists.
    """
    dist: list[float] = [math.inf] * n
    dist[src] = 0
    for round_number in range(n):
        changed = False
        for u, v, weight in edges:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                if round_number == n - 1:
                    raise NegativeCycleError("graph contains a negative cycle")
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break
    return dist


def dijkstra(n: int, graph: Sequence[Iterable[tuple[int, int]]], src: int) -> list[float]:
    """Distances from ``src``; ``graph[u]`` lists ``(v, weight)`` with weight >= 0."""
    dist: list[float] = [math.inf] * n
    dist[src] = 0
    heap = [(0, src)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for child, weight in graph[node]:
            candidate = distance + weight
            if candidate < dist[child]:
                dist[child] = candidate
                heapq.heappush(heap, (candidate, child))
    return dist


def floyd_warshall(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square weight matrix.

    Missing edges are ``math.inf``. The input is left unchanged.
    """
    result = [list(row) for row in dist]
    size = len(result)
    if any(len(row) != size for row in result):
        raise ValueError("distance matrix must be square")
    for k, row_k in enumerate(result):
        for row_i in result:
            via = row_i[k]
            if via == math.inf:
                continue
            row_i[:] = [min(current, via + step) for current, step in zip(row_i, row_k)]
            row_k = result[k]
    return result


def _topological_order(graph: Sequence[Iterable[tuple[int, int]]], n: int) -> list[int]:
    visited = [False] * n
    order: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(graph[start]))]
        while stack:
            node, children = stack[-1]
            for child, _weight in children:
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(graph[child])))
                    break
            else:
                stack.pop()
                order.append(node)
    order.reverse()
    return order


def dag_shortest_path(
    graph: Sequence[Sequence[tuple[int, int]]], n: int, start: int
) -> list[float]:
    """Distances from ``start`` in a weighted DAG, relaxing in topological order."""
    dist: list[float] = [math.inf] * n
    dist[start] = 0
    for node in _topological_order(graph, n):
        if dist[node] == math.inf:
            continue
        for child, weight in graph[node]:
            if dist[node] + weight < dist[child]:
                dist[child] = dist[node] + weight
    return dist


def unit_weight_shortest_path(n: int, graph: Sequence[Iterable[int]], src: int) -> list[float]:
    """Breadth-first distances from ``src`` where every edge has weight 1."""
    dist: list[float] = [math.inf] * n
    dist[src] = 0
    queue = deque([src])
    while queue:
        node = queue.popleft()
        for child in graph[node]:
            if dist[child] > dist[node] + 1:
                dist[child] = dist[node] + 1
                queue.append(child)
    return dist