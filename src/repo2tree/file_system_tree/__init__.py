"""Annotated tree representation of a repository.

This package provides the node type, the walker that builds the tree while
applying ignore rules and import tracking, and the counter that totals it.
"""

from .counter import count_node, count_tree
from .tree_node import IGNORED_MARKER, TreeNode
from .tree_walker import TreeWalker, walk

__all__ = ["IGNORED_MARKER", "TreeNode", "TreeWalker", "count_node", "count_tree", "walk"]
