"""Prefix tree mapping string keys to values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class TrieNode:
    """Node of a trie; ``ending`` marks the last character of a stored key."""

    parent: Optional[TrieNode] = None
    char: str = ""
    children: dict[str, TrieNode] = field(default_factory=dict)
    value: Any = None
    ending: bool = False


class Trie:
    """Mapping from non-empty string keys to values, stored character by character."""

    def __init__(self) -> None:
        self.root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.node(key) is not None

    def clear(self) -> None:
        """Remove every key."""
        self.root = TrieNode()
        self._size = 0

    def add(self, key: str, value: Any) -> Any:
        """Store ``value`` under ``key``; return the value it replaced, or None."""
        if not key:
            raise ValueError("key must not be empty")
        node = self.root
        for char in key:
            child = node.children.get(char)
            if child is None:
                child = TrieNode(parent=node, char=char)
                node.children[char] = child
            node = child
        if node.ending:
            old, node.value = node.value, value
            return old
        node.ending = True
        node.value = value
        self._size += 1
        return None

    def node(self, key: str) -> Optional[TrieNode]:
        """Return the node ending ``key`` when ``key`` is stored, else None."""
        if not key:
            return None
        node: Optional[TrieNode] = self.root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return None
        return node if node.ending else None

    def remove(self, key: str) -> Any:
        """Remove ``key`` and return its value; raises KeyError when absent.

        Nodes left with no children and no key of their own are pruned.
        """
        node = self.node(key)
        if node is None:
            raise KeyError(key)
        self._size -= 1
        value = node.value
        node.ending = False
        node.value = None
        while node.parent is not None and not node.children and not node.ending:
            del node.parent.children[node.char]
            node = node.parent
        return value