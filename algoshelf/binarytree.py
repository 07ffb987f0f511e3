"""Binary tree nodes, level-order decoding and iterative traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def from_level_order(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, where None marks a missing child."""
    values = list(values)
    if not values:
        return None
    if values[0] is None:
        raise ValueError("the root value cannot be None")
    root = TreeNode(values[0])
    pending: deque[TreeNode] = deque([root])
    is_left = True
    for value in values[1:]:
        if not pending:
            raise ValueError("more values than open child slots")
        parent = pending[0]
        if value is not None:
            child = TreeNode(value)
            if is_left:
                parent.left = child
            else:
                parent.right = child
            pending.append(child)
        if not is_left:
            pending.popleft()
        is_left = not is_left
    return root


def to_level_order(root: TreeNode | None) -> list[int | None]:
    """Encode a tree as level-order values with trailing None entries removed."""
    out: list[int | None] = []
    queue: deque[TreeNode | None] = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        if node is None:
            out.append(None)
            continue
        out.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while out and out[-1] is None:
        out.pop()
    return out


_Entry = tuple[TreeNode | None, bool]


def _traverse(
    root: TreeNode | None, arrange: Callable[[TreeNode], list[_Entry]]
) -> list[int]:
    """Walk a tree with an explicit stack; a True flag marks a node ready to emit."""
    result: list[int] = []
    stack: list[_Entry] = [(root, False)] if root is not None else []
    while stack:
        node, ready = stack.pop()
        if ready:
            result.append(node.val)
            continue
        stack.extend(entry for entry in arrange(node) if entry[0] is not None)
    return result


def preorder(root: TreeNode | None) -> list[int]:
    """Values in node, left, right order."""
    return _traverse(
        root, lambda n: [(n.right, False), (n.left, False), (n, True)]
    )


def inorder(root: TreeNode | None) -> list[int]:
    """Values in left, node, right order."""
    return _traverse(
        root, lambda n: [(n.right, False), (n, True), (n.left, False)]
    )


def postorder(root: TreeNode | None) -> list[int]:
    """Values in left, right, node order."""
    return _traverse(
        root, lambda n: [(n, True), (n.right, False), (n.left, False)]
    )


def binary_tree_paths(root: TreeNode | None) -> list[str]:
    """Every root-to-leaf path written as values joined by '->', left paths first."""
    if root is None:
        return []
    result: list[str] = []
    stack: list[tuple[TreeNode, str]] = [(root, str(root.val))]
    while stack:
        node, path = stack.pop()
        if node.left is None and node.right is None:
            result.append(path)
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, f"{path}->{child.val}"))
    return result