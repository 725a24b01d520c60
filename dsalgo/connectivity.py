"""Articulation points, bridges and strongly connected components."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def articulation_points(n: int, graph: Sequence[Iterable[int]]) -> list[int]:
    """Nodes whose removal splits their component of an undirected graph.

    ``graph[u]`` lists the neighbours of ``u`` for nodes ``0..n-1``.
    The result is in ascending order.
    """
    discovery = [-1] * n
    low = [0] * n
    marked = [False] * n
    timer = 0
    for root in range(n):
        if discovery[root] != -1:
            continue
        discovery[root] = low[root] = timer
        timer += 1
        root_children = 0
        stack = [(root, -1, iter(graph[root]))]
        while stack:
            node, parent, children = stack[-1]
            for child in children:
                if child == parent:
                    continue
                if discovery[child] == -1:
                    discovery[child] = low[child] = timer
                    timer += 1
                    stack.append((child, node, iter(graph[child])))
                    break
                low[node] = min(low[node], discovery[child])
            else:
                stack.pop()
                if parent == -1:
                    continue
                low[parent] = min(low[parent], low[node])
                if parent == root:
                    root_children += 1
                elif low[node] >= discovery[parent]:
                    marked[parent] = True
        if root_children > 1:
            marked[root] = True
    return [node for node, is_cut in enumerate(marked) if is_cut]


def bridges(n: int, connections: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Edges whose removal disconnects an undirected graph on nodes ``0..n-1``.

    Each bridge is reported as ``(child, parent)`` in depth-first order,
    in the order the child's subtree is finished.
    """
    graph: list[list[int]] = [[] for _ in range(n)]
    for u, v in connections:
        graph[u].append(v)
        graph[v].append(u)

    discovery = [-1] * n
    low = [0] * n
    timer = 0
    found: list[tuple[int, int]] = []
    for root in range(n):
        if discovery[root] != -1:
            continue
        discovery[root] = low[root] = timer
        timer += 1
        stack = [(root, -1, iter(graph[root]))]
        while stack:
            node, parent, children = stack[-1]
            for child in children:
                if child == parent:
                    continue
                if discovery[child] == -1:
                    discovery[child] = low[child] = timer
                    timer += 1
                    stack.append((child, node, iter(graph[child])))
                    break
                low[node] = min(low[node], discovery[child])
            else:
                stack.pop()
                if parent == -1:
                    continue
                low[parent] = min(low[parent], low[node])
                if low[node] > discovery[parent]:
                    found.append((node, parent))
    return found


def _finishing_order(n: int, graph: Sequence[Iterable[int]]) -> list[int]:
    visited = [False] * n
    order: list[int] = []
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
                order.append(node)
    return order


def count_strongly_connected_components(n: int, graph: Sequence[Iterable[int]]) -> int:
    """Number of strongly connected components of a directed graph (Kosaraju)."""
    adjacency = [list(graph[node]) for node in range(n)]
    order = _finishing_order(n, adjacency)

    reversed_graph: list[list[int]] = [[] for _ in range(n)]
    for node, children in enumerate(adjacency):
        for child in children:
            reversed_graph[child].append(node)

    visited = [False] * n
    components = 0
    for node in reversed(order):
        if visited[node]:
            continue
        components += 1
        visited[node] = True
        pending = [node]
        while pending:
            current = pending.pop()
            for child in reversed_graph[current]:
                if not visited[child]:
                    visited[child] = True
                    pending.append(child)
    return components