"""Ignore rules that match directories by bare name."""

from typing import Optional

from repo2tree.types import TreeEntry

from .base_rules import BaseIgnoreRule

WILDCARD_CHARACTERS = frozenset("*?")


class DirectoryNameRule(BaseIgnoreRule):
    """Ignore rule matching directory entries by exact, case-insensitive name.

    This is the weaker of the two supported rule flavors: the pattern names a
    directory, any leading or trailing ``/`` is dropped, and the rule matches a
    directory of that name at any depth. Files are never matched and the entry's
    path plays no part in the comparison.

    Attributes:
        directory_name (str): The lower-cased directory name to match.

    Example:
        >>> from repo2tree.types import TreeEntry
        >>> rule = DirectoryNameRule("Node_Modules")
        >>> rule.matches(TreeEntry("node_modules", "web/node_modules", True))
        True
        >>> rule.matches(TreeEntry("node_modules", "node_modules", False))
        False
    """

    def __init__(self, raw_pattern: str, annotation: Optional[str] = None) -> None:
        super().__init__(raw_pattern, annotation)
        self.directory_name = raw_pattern.strip().strip("/").lower()

    @property
    def is_valid(self) -> bool:
        """True if the pattern names a single directory without wildcards."""
        return (
            bool(self.directory_name)
            and "/" not in self.directory_name
            and not WILDCARD_CHARACTERS.intersection(self.directory_name)
        )

    def matches(self, entry: TreeEntry) -> bool:
        return entry.is_dir and entry.name.lower() == self.directory_name
