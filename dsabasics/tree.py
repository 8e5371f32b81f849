"""Binary tree nodes and traversals, sizes and shape checks."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    key: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _children(node: Node) -> Iterator[Node]:
    if node.left is not None:
        yield node.left
    if node.right is not None:
        yield node.right


def level_order_by_line(root: Optional[Node]) -> List[List[Any]]:
    """Return the keys level by level, each level from left to right."""
    levels: List[List[Any]] = []
    level = [root] if root is not None else []
    while level:
        levels.append([node.key for node in level])
        level = [child for node in level for child in _children(node)]
    return levels


def level_order(root: Optional[Node]) -> List[Any]:
    """Return the keys in breadth-first order."""
    keys: List[Any] = []
    pending = deque([root] if root is not None else [])
    while pending:
        node = pending.popleft()
        keys.append(node.key)
        pending.extend(_children(node))
    return keys


def max_width(root: Optional[Node]) -> int:
    """Return the number of nodes on the widest level."""
    return max((len(level) for level in level_order_by_line(root)), default=0)


def height(root: Optional[Node]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def is_balanced(root: Optional[Node]) -> bool:
    """Return True if at every node the subtree heights differ by at most one."""

    def checked_height(node: Optional[Node]) -> int:
        if node is None:
            return 0
        left = checked_height(node.left)
        if left < 0:
            return -1
        right = checked_height(node.right)
        if right < 0 or abs(left - right) > 1:
            return -1
        return max(left, right) + 1

    return checked_height(root) >= 0


def has_child_sum_property(root: Optional[Node]) -> bool:
    """Return True if every inner node's key equals the sum of its children's keys."""
    if root is None or (root.left is None and root.right is None):
        return True
    total = sum(child.key for child in _children(root))
    return (
        root.key == total
        and has_child_sum_property(root.left)
        and has_child_sum_property(root.right)
    )


def nodes_at_distance(root: Optional[Node], k: int) -> List[Any]:
    """Return the keys of the nodes ``k`` edges below the root, left to right."""
    if root is None or k < 0:
        return []
    if k == 0:
        return [root.key]
    return nodes_at_distance(root.left, k - 1) + nodes_at_distance(root.right, k - 1)


def _inorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


def _preorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.key


def inorder(root: Optional[Node]) -> List[Any]:
    """Return the keys in left, root, right order."""
    return list(_inorder(root))


def preorder(root: Optional[Node]) -> List[Any]:
    """Return the keys in root, left, right order."""
    return list(_preorder(root))


def postorder(root: Optional[Node]) -> List[Any]:
    """Return the keys in left, right, root order."""
    return list(_postorder(root))


def tree_size(root: Optional[Node]) -> int:
    """Return the number of nodes."""
    if root is None:
        return 0
    return 1 + tree_size(root.left) + tree_size(root.right)


def tree_max(root: Optional[Node]) -> Any:
    """Return the largest key in a non-empty tree."""
    if root is None:
        raise ValueError("maximum of an empty tree")
    return max(_preorder(root))