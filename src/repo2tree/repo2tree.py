"""Repository to annotated tree conversion.

This module ties the pieces together: it loads the ignore rules of a repository,
walks the repository into annotated nodes, counts them and streams the rendered
tree report.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional

from repo2tree.file_system_tree.counter import count_tree
from repo2tree.file_system_tree.tree_node import TreeNode
from repo2tree.file_system_tree.tree_walker import TreeWalker
from repo2tree.ignore_rules.rule_matcher import RuleMatcher
from repo2tree.ignore_rules.rule_syntax import RuleSyntax
from repo2tree.imports.import_extractor import ImportExtractor
from repo2tree.token_counter import TokenCounter
from repo2tree.tree_renderer import stream_tree_lines
from repo2tree.types import PathType, TreeCounts

logger = logging.getLogger(__name__)

DEFAULT_RULES_FILENAME = ".repo2treeignore"


class RepoTree:
    """Annotated tree of a repository, built lazily on first access.

    The tree is built in a single pass. Directories matched by the ignore rules are
    kept as ignored leaves, every other directory is descended into, and source
    files are annotated with the local modules they import. Counts are computed
    from the finished tree and the report is rendered from it on demand.

    Attributes:
        directory (Path): The repository root.
        rules_file (Path): The ignore-rule file; a missing file means no rules.
        rule_syntax (RuleSyntax): Matching semantics for the ignore rules.
        ignore_rules (bool): Whether ignore processing is enabled.
        track_imports (bool): Whether source files get import annotations.

    Example:
        >>> tree = RepoTree(".")  # doctest: +SKIP
        >>> for line in tree.stream_tree():  # doctest: +SKIP
        ...     print(line, end="")
        project/
        ├── dist/  # build artifacts
        └── src/
            ├── main.py  # references .util in imports
            └── util.py
        >>> tree.counts  # doctest: +SKIP
        TreeCounts(files=2, directories=2)

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the directory is not a directory.
        TokenizerNotAvailableError: If a tokenizer model is given without tiktoken installed.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        rules_file: Optional[PathType] = None,
        rule_syntax: RuleSyntax = RuleSyntax.GLOB,
        ignore_rules: bool = True,
        track_imports: bool = True,
        tokenizer_model: Optional[str] = None,
    ) -> None:
        self.directory = Path(directory)
        if not self.directory.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.directory}")
        if not self.directory.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.directory}")

        self.rules_file = Path(rules_file) if rules_file is not None else self.directory / DEFAULT_RULES_FILENAME
        self.rule_syntax = RuleSyntax(rule_syntax)
        self.ignore_rules = ignore_rules
        self.track_imports = track_imports
        self._counter = TokenCounter(model=tokenizer_model)

        self._root: Optional[TreeNode] = None
        self._counts: Optional[TreeCounts] = None

    def _build(self) -> None:
        matcher = RuleMatcher.from_file(self.rules_file, self.rule_syntax) if self.ignore_rules else None
        extractor = ImportExtractor() if self.track_imports else None
        walker = TreeWalker(self.directory, matcher=matcher, import_extractor=extractor)

        root = TreeNode(self.directory.resolve().name or str(self.directory), is_dir=True)
        walker.walk(parent=root)

        self._root = root
        self._counts = count_tree(root.children)
        logger.debug(
            "Built tree for %s: %d files, %d directories",
            self.directory,
            self._counts.files,
            self._counts.directories,
        )

    @property
    def root(self) -> TreeNode:
        """The node representing the repository root."""
        if self._root is None:
            self._build()
        assert self._root is not None
        return self._root

    @property
    def nodes(self) -> List[TreeNode]:
        """The top-level nodes of the repository, sorted by name."""
        return list(self.root.children)

    @property
    def counts(self) -> TreeCounts:
        """File and directory totals, excluding the root and anything inside ignored directories."""
        if self._counts is None:
            self._build()
        assert self._counts is not None
        return self._counts

    @property
    def file_count(self) -> int:
        return self.counts.files

    @property
    def directory_count(self) -> int:
        return self.counts.directories

    @property
    def line_count(self) -> int:
        """Lines of report streamed so far."""
        return self._counter.total_lines

    @property
    def character_count(self) -> int:
        """Characters of report streamed so far."""
        return self._counter.total_characters

    @property
    def token_count(self) -> Optional[int]:
        """Tokens of report streamed so far, or None if token counting is disabled."""
        return self._counter.total_tokens

    def stream_tree(self) -> Iterator[str]:
        """Stream the tree report one line at a time.

        Each yielded line ends with a newline and is added to the line, character
        and token counts.

        Yields:
            Lines of the tree report.
        """
        for line in stream_tree_lines(self.root):
            text = line + "\n"
            self._counter.count(text)
            yield text

    def get_tree_representation(self) -> str:
        """Get the complete tree report as a string, without a trailing newline."""
        return "".join(self.stream_tree()).rstrip("\n")

    def refresh(self) -> None:
        """Rebuild the tree to reflect the current filesystem state."""
        self._root = None
        self._counts = None
        self._counter.reset()
        self._build()
