"""Assorted algorithms on binary trees: merging, depth, paths and shape checks."""

from __future__ import annotations

from collections import deque

from .binarytree import TreeNode


def _pair_child(
    a: TreeNode | None,
    b: TreeNode | None,
    queue: deque[tuple[TreeNode, TreeNode, TreeNode]],
) -> TreeNode | None:
    """Child of a merged node: a fresh node queued for merging, or the lone subtree."""
    if a is not None and b is not None:
        node = TreeNode()
        queue.append((a, b, node))
        return node
    return a if a is not None else b


def merge_trees(root1: TreeNode | None, root2: TreeNode | None) -> TreeNode | None:
    """Overlay two trees, summing values where both have a node.

    Where only one tree has a subtree, that subtree is reused as it is.
    """
    if root1 is None:
        return root2
    if root2 is None:
        return root1
    root = TreeNode()
    queue: deque[tuple[TreeNode, TreeNode, TreeNode]] = deque([(root1, root2, root)])
    while queue:
        a, b, out = queue.popleft()
        out.val = a.val + b.val
        out.left = _pair_child(a.left, b.left, queue)
        out.right = _pair_child(a.right, b.right, queue)
    return root


def min_depth(root: TreeNode | None) -> int:
    """Number of nodes on the shortest path from the root to a leaf."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        if any(node.left is None and node.right is None for node in level):
            return depth
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return depth


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """True when both trees have the same shape and the same values."""
    stack: list[tuple[TreeNode | None, TreeNode | None]] = [(p, q)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        stack.append((a.right, b.right))
        stack.append((a.left, b.left))
    return True


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """True when some root-to-leaf path adds up to target_sum."""
    if root is None:
        return False
    stack: list[tuple[TreeNode, int]] = [(root, root.val)]
    while stack:
        node, total = stack.pop()
        if node.left is None and node.right is None and total == target_sum:
            return True
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, total + child.val))
    return False


def path_sum(root: TreeNode | None, target_sum: int) -> list[list[int]]:
    """Every root-to-leaf path whose values add up to target_sum, left paths first."""
    result: list[list[int]] = []
    if root is None:
        return result
    stack: list[tuple[TreeNode, list[int]]] = [(root, [root.val])]
    while stack:
        node, path = stack.pop()
        if node.left is None and node.right is None and sum(path) == target_sum:
            result.append(path)
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, [*path, child.val]))
    return result


def sum_of_left_leaves(root: TreeNode | None) -> int:
    """Sum of the values of all leaves that are a left child."""
    total = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        left = node.left
        if left is not None and left.left is None and left.right is None:
            total += left.val
        stack.extend(child for child in (node.right, node.left) if child is not None)
    return total


def is_symmetric(root: TreeNode | None) -> bool:
    """True when the tree is a mirror image of itself."""
    if root is None:
        return True
    stack: list[tuple[TreeNode | None, TreeNode | None]] = [(root.left, root.right)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        stack.append((a.left, b.right))
        stack.append((a.right, b.left))
    return True