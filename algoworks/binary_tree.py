"""Binary search tree of distinct integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class BinaryTreeNode:
    """Node of a binary search tree."""

    value: int
    left: Optional[BinaryTreeNode] = None
    right: Optional[BinaryTreeNode] = None


def _min_value(node: BinaryTreeNode) -> int:
    while node.left is not None:
        node = node.left
    return node.value


def _max_value(node: BinaryTreeNode) -> int:
    while node.right is not None:
        node = node.right
    return node.value


def _remove(node: Optional[BinaryTreeNode], value: int) -> Optional[BinaryTreeNode]:
    if node is None:
        raise KeyError(value)
    if value < node.value:
        node.left = _remove(node.left, value)
    elif value > node.value:
        node.right = _remove(node.right, value)
    elif node.left is None and node.right is None:
        return None
    elif node.right is not None:
        node.value = _min_value(node.right)
        node.right = _remove(node.right, node.value)
    else:
        node.value = _max_value(node.left)
        node.left = _remove(node.left, node.value)
    return node


def _preorder(node: Optional[BinaryTreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[BinaryTreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[BinaryTreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def max_depth(node: Optional[BinaryTreeNode]) -> int:
    """Return the number of levels in the subtree rooted at ``node``."""
    if node is None:
        return 0
    return max(max_depth(node.left), max_depth(node.right)) + 1


class BinaryTree:
    """Binary search tree; adding a value already present does nothing."""

    def __init__(self) -> None:
        self.root: Optional[BinaryTreeNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def add(self, value: int) -> None:
        """Insert ``value`` unless it is already present."""
        if self.root is None:
            self.root = BinaryTreeNode(value)
            self._size += 1
            return
        node = self.root
        while True:
            if value == node.value:
                return
            if value > node.value:
                if node.right is None:
                    node.right = BinaryTreeNode(value)
                    break
                node = node.right
            else:
                if node.left is None:
                    node.left = BinaryTreeNode(value)
                    break
                node = node.left
        self._size += 1

    def remove(self, value: int) -> None:
        """Remove ``value``; raises KeyError when it is not in the tree.

        A node with a right subtree takes its in-order successor's value;
        one with only a left subtree takes its predecessor's.
        """
        self.root = _remove(self.root, value)
        self._size -= 1

    def search(self, value: int) -> Optional[BinaryTreeNode]:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.right if value > node.value else node.left
        return node

    def preorder(self) -> list[int]:
        """Values in root, left, right order."""
        return list(_preorder(self.root))

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        return list(_inorder(self.root))

    def postorder(self) -> list[int]:
        """Values in left, right, root order."""
        return list(_postorder(self.root))

    def max_depth(self) -> int:
        """Return the number of levels in the tree."""
        return max_depth(self.root)