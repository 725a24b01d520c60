"""Cycle detection and topological ordering of directed graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def has_cycle(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether a directed graph on nodes ``1..n`` contains a cycle."""
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        graph[u].append(v)

    visited = [False] * (n + 1)
    on_path = [False] * (n + 1)
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack = [(start, iter(graph[start]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = on_path[child] = True
                    stack.append((child, iter(graph[child])))
                    break
                if on_path[child]:
                    return True
            else:
                stack.pop()
                on_path[node] = False
    return False


def kahn_topological_sort(n: int, graph: Sequence[Iterable[int]]) -> list[int]:
    """Breadth-first topological order of nodes ``0..n-1``.

    If the graph has a cycle, the nodes on or behind it are left out.
    """
    adjacency = [list(graph[node]) for node in range(n)]
    indegree = [0] * n
    for children in adjacency:
        for child in children:
            indegree[child] += 1

    queue = deque(node for node in range(n) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for child in adjacency[node]:
            indegree[child] -= 1
            if indegree[child] == 0:
                queue.append(child)
    return order


def topological_sort(n: int, graph: Sequence[Iterable[int]]) -> list[int]:
    """Depth-first topological order of a DAG on nodes ``0..n-1``."""
    visited = [False] * n
    finished: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(graph[start]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(graph[child])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished