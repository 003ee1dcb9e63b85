"""Binary trees: traversals, generation, symmetry, depth and equivalence."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from leetkit.linked import ListNode, list_length


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _inorder(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node
    yield from _inorder(node.right)


def inorder_traversal(root: Optional[TreeNode]) -> List[int]:
    """Return the values in left, root, right order."""
    return [node.val for node in _inorder(root)]


def preorder_traversal(root: Optional[TreeNode]) -> List[int]:
    """Return the values in root, left, right order."""
    result: List[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder_traversal(root: Optional[TreeNode]) -> List[int]:
    """Return the values visiting each node before its right, then its left subtree."""
    result: List[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return result


def _shifted(node: Optional[TreeNode], diff: int) -> Optional[TreeNode]:
    if node is None:
        return None
    return TreeNode(node.val + diff, _shifted(node.left, diff), _shifted(node.right, diff))


def _generate(
    base: int, n: int, cache: Dict[int, List[TreeNode]]
) -> List[TreeNode]:
    n -= base
    if n in cache:
        return [_shifted(tree, base) for tree in cache[n]]  # type: ignore[misc]

    result: List[TreeNode] = []
    if n == 1:
        result.append(TreeNode(1))
    elif n != 0:
        for left_len in range(n):
            right_len = n - 1 - left_len
            lefts: List[Optional[TreeNode]] = list(_generate(0, left_len, cache)) or [None]
            rights: List[Optional[TreeNode]] = list(
                _generate(right_len, n - 1, cache)
            ) or [None]
            result.extend(
                TreeNode(left_len + 1, left, right) for left in lefts for right in rights
            )
    cache[n] = result
    return result


def generate_trees(n: int) -> List[TreeNode]:
    """Return trees built by splitting ``n`` nodes around each root value.

    Each root ``k`` gets left and right subtrees both drawn from the trees
    of size ``k - 1``.
    """
    return _generate(0, n, {})


class _Side(Enum):
    LEFT = 1
    RIGHT = 2


def _left_to_right(
    node: Optional[TreeNode], side: _Side
) -> Iterator[Tuple[int, _Side]]:
    if node is None:
        return
    yield from _left_to_right(node.left, _Side.LEFT)
    yield node.val, side
    yield from _left_to_right(node.right, _Side.RIGHT)


def _right_to_left(
    node: Optional[TreeNode], side: _Side
) -> Iterator[Tuple[int, _Side]]:
    if node is None:
        return
    yield from _right_to_left(node.right, _Side.RIGHT)
    yield node.val, side
    yield from _right_to_left(node.left, _Side.LEFT)


def is_symmetric(root: TreeNode) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    if root is None:
        raise ValueError("root must not be None")
    left = list(_left_to_right(root.left, _Side.LEFT))
    right = list(_right_to_left(root.right, _Side.RIGHT))
    if len(left) != len(right):
        return False
    return all(
        lval == rval and lside != rside
        for (lval, lside), (rval, rside) in zip(left, right)
    )


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def _balanced_shape(start: int, end: int) -> Optional[TreeNode]:
    if start > end:
        return None
    if start == end:
        return TreeNode()
    mid = (start + end) // 2
    return TreeNode(0, _balanced_shape(start, mid - 1), _balanced_shape(mid + 1, end))


def sorted_list_to_bst(head: Optional[ListNode]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from a sorted linked list."""
    if head is None:
        return None
    tree = _balanced_shape(0, list_length(head) - 1)
    for tree_node, list_node in zip(_inorder(tree), head):
        tree_node.val = list_node.val
    return tree


def flip_equiv(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Tell whether the trees are equal after swapping children at some nodes."""
    if root1 is None or root2 is None:
        return root1 is None and root2 is None
    if root1.val != root2.val:
        return False
    return (
        flip_equiv(root1.left, root2.left) and flip_equiv(root1.right, root2.right)
    ) or (flip_equiv(root1.left, root2.right) and flip_equiv(root1.right, root2.left))