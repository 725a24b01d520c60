"""Prefix tree of words and Morris in-order traversal of binary trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """A set of words that also answers prefix queries."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.terminal = True

    def _walk(self, text: str) -> Optional[_TrieNode]:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Whether ``word`` itself was inserted."""
        node = self._walk(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None


def morris_inorder(root: Optional[TreeNode]) -> list[Any]:
    """In-order values using temporary threads instead of a stack.

    The tree is restored to its original shape before returning.
    """
    values: list[Any] = []
    current = root
    while current is not None:
        if current.left is None:
            values.append(current.val)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            values.append(current.val)
            current = current.right
    return values