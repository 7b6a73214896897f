"""Binary tree nodes linked to their parent and children."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class Node:
    """A binary tree node holding a value and links to its relatives."""

    value: int
    parent: Node | None = None
    left: Node | None = None
    right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves below it."""
        node = Node(value, parent=self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves below it."""
        node = Node(value, parent=self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Detach this subtree from its parent and unlink all of its nodes."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.parent = node.left = node.right = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.right is self:
            return parent.left
        if parent.left is self:
            return parent.right
        return None

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, if any."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if grandparent.left is parent:
            return grandparent.right
        return grandparent.left