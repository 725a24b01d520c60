"""Disjoint-set forest with path compression and union by size."""

from __future__ import annotations

from collections.abc import Iterable


class DisjointSet:
    """Disjoint sets over the nodes ``0..n`` (nodes are usually numbered from 1)."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of nodes must not be negative")
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is outside the set")

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return False if already joined."""
        a = self.find(u)
        b = self.find(v)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True


def count_components(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count connected components of an undirected graph on nodes ``1..n``."""
    dsu = DisjointSet(n)
    for u, v in edges:
        dsu.union(u, v)
    return sum(1 for node in range(1, n + 1) if dsu.find(node) == node)