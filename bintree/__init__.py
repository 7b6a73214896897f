"""A linked binary tree of integers with traversals and measurements."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "measure"]