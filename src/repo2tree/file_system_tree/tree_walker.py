"""Recursive directory traversal producing annotated tree nodes.

The walker visits the entries of a directory in name order, marks directories
matched by the ignore rules without descending into them, recurses into every
other directory and annotates source files with their local imports.
"""

import logging
import os
import stat
from pathlib import Path
from typing import List, Optional

from pathspec.util import normalize_file

from repo2tree.ignore_rules.rule_matcher import RuleMatcher
from repo2tree.imports.import_extractor import ImportExtractor
from repo2tree.types import PathType, TreeEntry

from .tree_node import IGNORED_MARKER, TreeNode

logger = logging.getLogger(__name__)

SKIPPED_NAMES = frozenset({".git"})


class TreeWalker:
    """Builds annotated TreeNodes for the contents of a repository.

    Attributes:
        root_path (Path): The repository root; ignore rules see paths relative to it.
        matcher (Optional[RuleMatcher]): Ignore rules, or None to disable ignore processing.
        import_extractor (Optional[ImportExtractor]): Import annotator, or None to disable
            import tracking.

    Example:
        >>> walker = TreeWalker(".", matcher=RuleMatcher.from_text("node_modules"))  # doctest: +SKIP
        >>> [node.name for node in walker.walk()]  # doctest: +SKIP
        ['README.md', 'node_modules', 'src']
    """

    def __init__(
        self,
        root_path: PathType,
        matcher: Optional[RuleMatcher] = None,
        import_extractor: Optional[ImportExtractor] = None,
    ) -> None:
        self.root_path = Path(root_path)
        self.matcher = matcher
        self.import_extractor = import_extractor

    def walk(self, path: Optional[PathType] = None, parent: Optional[TreeNode] = None) -> List[TreeNode]:
        """Create nodes for the entries of a directory, recursing into subdirectories.

        Args:
            path: Directory to walk. Defaults to the repository root.
            parent: Node to attach the created nodes to. Defaults to None, in which
                case the returned nodes are detached.

        Returns:
            The nodes for the direct children of ``path``, sorted by name. An
            unreadable directory yields an empty list.
        """
        directory = self.root_path if path is None else Path(path)

        try:
            names = sorted(os.listdir(directory))
        except OSError as e:
            logger.debug("Cannot list directory %s: %s", directory, e)
            return []

        nodes: List[TreeNode] = []
        for name in names:
            if name in SKIPPED_NAMES:
                continue
            nodes.append(self._create_node(directory / name, parent))
        return nodes

    def _relative_path(self, path: Path) -> str:
        return normalize_file(os.path.relpath(path, self.root_path))

    def _create_node(self, path: Path, parent: Optional[TreeNode]) -> TreeNode:
        """Create the node for one entry, descending into non-ignored directories."""
        # lstat keeps symlinks listed but never followed
        try:
            is_dir = stat.S_ISDIR(path.lstat().st_mode)
        except OSError as e:
            logger.debug("Cannot stat %s, listing it as a file: %s", path, e)
            return TreeNode(path.name, parent=parent)

        if is_dir and self.matcher is not None:
            result = self.matcher.match(TreeEntry(path.name, self._relative_path(path), True))
            if result.ignored:
                logger.debug("Ignoring %s (%s)", path, result.annotation or "no annotation")
                return TreeNode(
                    path.name,
                    parent=parent,
                    is_dir=True,
                    is_ignored=True,
                    annotation=result.annotation or IGNORED_MARKER,
                )

        if is_dir:
            node = TreeNode(path.name, parent=parent, is_dir=True)
            self.walk(path, parent=node)
            return node

        annotation = None
        if self.import_extractor is not None:
            annotation = self.import_extractor.extract_file(path)
        return TreeNode(path.name, parent=parent, annotation=annotation)


def walk(
    path: PathType,
    rules: Optional[RuleMatcher] = None,
    skip_import_tracking: bool = False,
) -> List[TreeNode]:
    """Walk a repository and return the annotated nodes of its top-level entries.

    Args:
        path: The repository root.
        rules: Ignore rules, or None to disable ignore processing.
        skip_import_tracking: True to leave source files without import annotations.

    Returns:
        Detached top-level nodes, sorted by name, with their subtrees attached.
    """
    extractor = None if skip_import_tracking else ImportExtractor()
    return TreeWalker(path, matcher=rules, import_extractor=extractor).walk()
