"""Linked lists and binary trees with the operations that walk them."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> ListNode | None:
        """Build a list from the values; an empty input gives None."""
        head: ListNode | None = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return list(self)

    def __repr__(self) -> str:
        return f"ListNode({self.to_list()!r})"


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def kth_largest_level_sum(root: TreeNode | None, k: int) -> int:
    """Return the ``k``-th largest sum of a tree level, or -1 if there are fewer levels.

    Raises ValueError when ``k`` is below one.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    sums: list[int] = []
    level = [root] if root is not None else []
    while level:
        sums.append(sum(node.val for node in level))
        level = [child for node in level for child in (node.left, node.right) if child]
    if len(sums) < k:
        return -1
    return heapq.nlargest(k, sums)[-1]


def insert_greatest_common_divisors(head: ListNode | None) -> ListNode | None:
    """Insert between each pair of adjacent nodes a node holding their gcd."""
    node = head
    while node is not None and node.next is not None:
        following = node.next
        node.next = ListNode(math.gcd(node.val, following.val), following)
        node = following
    return head


def remove_listed_values(nums: Iterable[int], head: ListNode | None) -> ListNode | None:
    """Unlink every node whose value is among ``nums`` and return the new head."""
    banned = set(nums)
    while head is not None and head.val in banned:
        head = head.next
    node = head
    while node is not None and node.next is not None:
        if node.next.val in banned:
            node.next = node.next.next
        else:
            node = node.next
    return head