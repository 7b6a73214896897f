# bintree

A small linked binary tree of integers. Every node knows its parent and its
two children, so you can walk up the tree as well as down.

## Installation

```
pip install .
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
```

`Node(value)` creates a node with no parent and no children. The attributes
`value`, `parent`, `left` and `right` can be read and set directly.

`insert_left` and `insert_right` return the new node. If the parent already
had a child on that side, the old child moves down one level and becomes the
new node's child on the same side.

A node answers questions about its place in the tree:

```python
left.is_leaf()      # False: it has a right child
root.is_root()      # True
left.sibling()      # the node holding 402
left.right.uncle()  # the node holding 402
```

`sibling()` and `uncle()` return `None` when there is no such node.

`delete()` detaches a node from its parent and clears the `parent`, `left`
and `right` links of that node and of every node below it.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))   # [98, 12, 54, 402]
list(inorder(root))    # [12, 54, 98, 402]
list(postorder(root))  # [54, 12, 402, 98]
```

Each traversal is a generator of node values and yields nothing for an empty
tree (`None`). The traversals are iterative, so deep trees do not hit the
recursion limit.

## Measurements

```python
from bintree import measure

measure.height(root)          # edges on the longest path down; 0 for a leaf
measure.depth(left)           # edges from the node up to its root
measure.size(root)            # number of nodes
measure.leaves(root)          # number of nodes with no children
measure.internal_nodes(root)  # number of nodes with at least one child
measure.balance(root)         # levels in left subtree minus levels in right
measure.is_full(root)         # every node has zero or two children
measure.is_perfect(root)      # full, with all leaves on the same level
```

All measurements accept `None` for an empty tree: the counting functions
return `0` and `is_full` and `is_perfect` return `False`.

## What it does not do

The package has no function that draws or prints a tree, and no command-line
program; it is a library to be imported.

## Running the tests

```
pip install ".[test]"
pytest
```