"""Node representation for entries in the repository tree."""

from typing import Any, Optional

from anytree import Node

IGNORED_MARKER = "(ignored)"


class TreeNode(Node):  # type: ignore
    """Node class representing a file or directory in the repository tree.

    Extends anytree.Node with the flags and annotation needed to render one line per
    entry. Ignored directories keep their own node but never get children, so a
    renderer or counter walking the tree never descends into them.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[TreeNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory.
        is_ignored (bool): True if an ignore rule matched this directory.
        annotation (Optional[str]): The ignore reason or the local-import summary.
        children (tuple[TreeNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = TreeNode("repo", is_dir=True)
        >>> dist = TreeNode("dist", parent=root, is_dir=True, is_ignored=True, annotation="build artifacts")
        >>> dist.is_ignored, dist.annotation
        (True, 'build artifacts')
        >>> [child.name for child in root.children]
        ['dist']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        is_dir: bool = False,
        is_ignored: bool = False,
        annotation: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.is_ignored = is_ignored
        self.annotation = annotation

    def _pre_attach(self, parent: "TreeNode") -> None:
        if parent.is_ignored:
            raise ValueError(f"Ignored directory {parent.name!r} cannot have children")
        if not parent.is_dir:
            raise ValueError(f"File {parent.name!r} cannot have children")
