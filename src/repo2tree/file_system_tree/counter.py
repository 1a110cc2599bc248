"""Counting of files and directories in a repository tree."""

from typing import Iterable

from anytree import PreOrderIter

from repo2tree.types import TreeCounts

from .tree_node import TreeNode


def count_node(node: TreeNode) -> TreeCounts:
    """Count the files and directories of a node and everything below it.

    The node itself is included. Ignored directories count as one directory and
    nothing below them is visited.

    Example:
        >>> root = TreeNode("src", is_dir=True)
        >>> _ = TreeNode("main.py", parent=root)
        >>> _ = TreeNode("build", parent=root, is_dir=True, is_ignored=True)
        >>> count_node(root)
        TreeCounts(files=1, directories=2)
    """
    files = 0
    directories = 0
    for current in PreOrderIter(node, stop=lambda n: n.parent is not None and n.parent.is_ignored):
        if current.is_dir:
            directories += 1
        else:
            files += 1
    return TreeCounts(files=files, directories=directories)


def count_tree(nodes: Iterable[TreeNode]) -> TreeCounts:
    """Total the files and directories of a sequence of top-level nodes.

    Args:
        nodes: The nodes returned by a walk, e.g. the children of the repository root.

    Returns:
        TreeCounts: Totals over all nodes and their non-ignored descendants.
    """
    files = 0
    directories = 0
    for node in nodes:
        counts = count_node(node)
        files += counts.files
        directories += counts.directories
    return TreeCounts(files=files, directories=directories)
