"""Level-order work on n-ary trees and on trees with next-right pointers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import pairwise


@dataclass(eq=False)
class NaryNode:
    """A tree node with any number of children."""

    val: int = 0
    children: list[NaryNode] = field(default_factory=list)


@dataclass(eq=False)
class NextNode:
    """A binary tree node that also points to its right neighbour on its level."""

    val: int = 0
    left: NextNode | None = None
    right: NextNode | None = None
    next: NextNode | None = None


def nary_from_level_order(values: Iterable[int | None]) -> NaryNode | None:
    """Build an n-ary tree from level-order values; None ends each child group."""
    values = list(values)
    if not values:
        return None
    if values[0] is None:
        raise ValueError("the root value cannot be None")
    root = NaryNode(values[0])
    parents: deque[NaryNode] = deque([root])
    current: NaryNode | None = None
    for value in values[1:]:
        if value is None:
            if not parents:
                raise ValueError("a separator has no parent left to start")
            current = parents.popleft()
            continue
        if current is None:
            raise ValueError("children must follow a None separator")
        child = NaryNode(value)
        current.children.append(child)
        parents.append(child)
    return root


def nary_level_order(root: NaryNode | None) -> list[list[int]]:
    """Values of an n-ary tree grouped level by level."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    while level:
        levels.append([node.val for node in level])
        level = [child for node in level for child in node.children]
    return levels


def next_tree_from_level_order(values: Iterable[int | None]) -> NextNode | None:
    """Build a binary tree of NextNode from level-order values with None gaps."""
    values = list(values)
    if not values:
        return None
    if values[0] is None:
        raise ValueError("the root value cannot be None")
    root = NextNode(values[0])
    pending: deque[NextNode] = deque([root])
    is_left = True
    for value in values[1:]:
        if not pending:
            raise ValueError("more values than open child slots")
        parent = pending[0]
        if value is not None:
            child = NextNode(value)
            if is_left:
                parent.left = child
            else:
                parent.right = child
            pending.append(child)
        if not is_left:
            pending.popleft()
        is_left = not is_left
    return root


def connect(root: NextNode | None) -> NextNode | None:
    """Point every node's next at its right neighbour on the same level."""
    level = [root] if root is not None else []
    while level:
        for node, neighbour in pairwise(level):
            node.next = neighbour
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return root