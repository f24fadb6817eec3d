"""Singly, doubly and circularly linked lists with a few classic list puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """Node of a singly linked list."""

    val: Any = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> Optional[ListNode]:
        """Build a chain from ``values`` and return its head (None when empty)."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def to_list(self) -> list[Any]:
        """Return the values from this node to the end of the chain.

        The chain must not be circular.
        """
        values = []
        node: Optional[ListNode] = self
        while node is not None:
            values.append(node.val)
            node = node.next
        return values


class LinkedList:
    """Singly linked list addressed through its head node."""

    def __init__(self) -> None:
        self.head: Optional[ListNode] = None

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.val
            node = node.next

    def add(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self.head = ListNode(value, self.head)

    def append(self, value: Any) -> None:
        """Insert ``value`` at the end."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node

    def remove(self, index: int) -> None:
        """Remove the node at position ``index``; raises IndexError when out of range."""
        if index < 0 or self.head is None:
            raise IndexError("list index out of range")
        if index == 0:
            self.head = self.head.next
            return
        prev = self.head
        for _ in range(index - 1):
            prev = prev.next
            if prev is None:
                raise IndexError("list index out of range")
        if prev.next is None:
            raise IndexError("list index out of range")
        prev.next = prev.next.next

    def middle(self) -> Any:
        """Return the middle value using a slow and a fast pointer.

        For an even number of nodes the second of the two middle values is returned.
        """
        if self.head is None:
            raise IndexError("list is empty")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.val

    def has_cycle(self) -> bool:
        """Return True when following ``next`` links revisits a node."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False


@dataclass(eq=False, repr=False)
class DoubleNode:
    """Node of a doubly linked list."""

    value: Any
    prev: Optional[DoubleNode] = None
    next: Optional[DoubleNode] = None


class DoubleLinkedList:
    """Doubly linked list with head and tail pointers."""

    def __init__(self) -> None:
        self.head: Optional[DoubleNode] = None
        self.tail: Optional[DoubleNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def add(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        node = DoubleNode(value)
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the end."""
        node = DoubleNode(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            node.prev = self.tail
            self.tail.next = node
            self.tail = node
        self._size += 1


def build_cycle(n: int) -> ListNode:
    """Build a circular list holding 1..n and return the node holding 1."""
    if n < 1:
        raise ValueError("a cycle needs at least one node")
    nodes = [ListNode(value) for value in range(1, n + 1)]
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    nodes[-1].next = nodes[0]
    return nodes[0]


def josephus(n: int) -> list[int]:
    """Count around a circle of 1..n removing every third person.

    Returns the order of removal; its last element is the survivor.
    """
    node = build_cycle(n)
    prev = node
    while prev.next is not node:
        prev = prev.next
    order = []
    count = 0
    while node.next is not node:
        count += 1
        if count == 3:
            order.append(node.val)
            prev.next = node.next
            node = node.next
            count = 0
        else:
            prev = node
            node = node.next
    order.append(node.val)
    return order


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes (relinking, not copying values); return the new head."""
    if head is None or head.next is None:
        return head
    following = head.next
    rest = following.next
    following.next = head
    head.next = swap_pairs(rest)
    return following


def remove_adjacent_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop each pair of adjacent equal nodes, rechecking from the node before the pair."""
    sentinel = ListNode(None, head)
    curr = pre = sentinel
    while curr.next is not None:
        if curr is not sentinel and curr.val == curr.next.val:
            pre.next = curr.next.next
            curr = pre
            continue
        pre = curr
        curr = curr.next
    return sentinel.next