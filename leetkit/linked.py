"""Singly linked lists: building, reordering and intersection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def to_list(self) -> List[int]:
        """Return the values from this node to the end of the list."""
        return [node.val for node in self]


def list_from_values(*args: int) -> Optional[ListNode]:
    """Build a list holding ``args`` in order; ``None`` when there are none."""
    head: Optional[ListNode] = None
    for value in reversed(args):
        head = ListNode(value, head)
    return head


def list_length(head: Optional[ListNode]) -> int:
    """Count the nodes reachable from ``head``."""
    return 0 if head is None else sum(1 for _ in head)


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder in place to first, last, second, second-to-last, ..."""
    if head is None:
        return
    values = head.to_list()
    ordered: List[int] = []
    left, right = 0, len(values) - 1
    while left < right:
        ordered.append(values[left])
        ordered.append(values[right])
        left += 1
        right -= 1
    if left == right:
        ordered.append(values[left])
    for node, value in zip(head, ordered):
        node.val = value


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or ``None``."""
    len_a = list_length(head_a)
    len_b = list_length(head_b)

    while len_a > len_b:
        head_a = head_a.next  # type: ignore[union-attr]
        len_a -= 1
    while len_b > len_a:
        head_b = head_b.next  # type: ignore[union-attr]
        len_b -= 1

    while head_a is not head_b:
        head_a = head_a.next  # type: ignore[union-attr]
        head_b = head_b.next  # type: ignore[union-attr]
    return head_a