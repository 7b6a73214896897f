"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from collections.abc import Iterator

from bintree.node import Node


def _walk(tree: Node | None) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def _levels(tree: Node | None) -> int:
    """Number of levels in the tree: 0 for an empty tree, 1 for a single node."""
    levels = 0
    level = [tree] if tree is not None else []
    while level:
        levels += 1
        level = [c for n in level for c in (n.left, n.right) if c is not None]
    return levels


def height(tree: Node | None) -> int:
    """Return the number of edges on the longest path down; 0 for empty or a leaf."""
    return max(_levels(tree) - 1, 0)


def depth(tree: Node | None) -> int:
    """Return the number of edges from the node up to its root."""
    count = 0
    node = tree
    while node is not None and node.parent is not None:
        node = node.parent
        count += 1
    return count


def size(tree: Node | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Node | None) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.is_leaf())


def internal_nodes(tree: Node | None) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def balance(tree: Node | None) -> int:
    """Return the left subtree's level count minus the right subtree's."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Node | None) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((n.left is None) == (n.right is None) for n in _walk(tree))


def is_perfect(tree: Node | None) -> bool:
    """Return True if all internal nodes have two children and leaves share one level."""
    if tree is None:
        return False
    return size(tree) == 2 ** _levels(tree) - 1