"""Operations on binary search trees."""

from __future__ import annotations

from itertools import pairwise

from .binarytree import TreeNode, inorder


def minimum_difference(root: TreeNode | None) -> int:
    """Smallest difference between values adjacent in in-order sequence."""
    values = inorder(root)
    if len(values) < 2:
        raise ValueError("a tree needs at least two nodes")
    return min(b - a for a, b in pairwise(values))


def search_bst(root: TreeNode | None, val: int) -> TreeNode | None:
    """Return the node holding val, or None when it is absent."""
    node = root
    while node is not None:
        if node.val == val:
            return node
        node = node.left if node.val > val else node.right
    return None


def trim_bst(root: TreeNode | None, low: int, high: int) -> TreeNode | None:
    """Remove, in place, every node whose value lies outside [low, high]."""
    if root is None:
        return None
    if root.val < low:
        return trim_bst(root.right, low, high)
    if root.val > high:
        return trim_bst(root.left, low, high)
    root.left = trim_bst(root.left, low, high)
    root.right = trim_bst(root.right, low, high)
    return root


def is_valid_bst(root: TreeNode | None) -> bool:
    """True when the in-order values are strictly increasing."""
    return all(a < b for a, b in pairwise(inorder(root)))