"""Minimum spanning tree weights by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from dsalgo.dsu import DisjointSet


def kruskal_mst(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total weight of a minimum spanning forest; edges are ``(u, v, weight)``."""
    dsu = DisjointSet(n)
    return sum(
        weight
        for u, v, weight in sorted(edges, key=lambda edge: edge[2])
        if dsu.union(u, v)
    )


def prim_mst(n: int, graph: Sequence[Iterable[tuple[int, int]]]) -> int:
    """Weight of the minimum spanning tree of the component holding node 0.

    ``graph[u]`` lists ``(v, weight)`` pairs of an undirected graph.
    """
    if n == 0:
        return 0
    visited = [False] * n
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for child, edge_weight in graph[node]:
            if not visited[child]:
                heapq.heappush(heap, (edge_weight, child))
    return total