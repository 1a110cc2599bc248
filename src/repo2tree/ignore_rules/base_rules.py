from abc import ABC, abstractmethod
from typing import Optional

from repo2tree.types import TreeEntry


class BaseIgnoreRule(ABC):
    """
    Abstract base class for a single compiled ignore rule.

    A rule is built from one pattern line of an ignore-rule file and carries the
    annotation taken from the comment line preceding it, if any. Concrete rule types
    decide how the pattern is compared against a filesystem entry.

    Attributes:
        raw_pattern (str): The pattern line exactly as it appeared in the rule file.
        annotation (Optional[str]): Human-readable reason attached to the rule.

    Example:
        >>> from repo2tree.types import TreeEntry
        >>> class SuffixRule(BaseIgnoreRule):
        ...     def matches(self, entry: TreeEntry) -> bool:
        ...         return entry.name.endswith(self.raw_pattern)
        >>> rule = SuffixRule(".egg-info", "packaging metadata")
        >>> rule.matches(TreeEntry("repo2tree.egg-info", "src/repo2tree.egg-info", True))
        True
        >>> rule.annotation
        'packaging metadata'
    """

    def __init__(self, raw_pattern: str, annotation: Optional[str] = None) -> None:
        self.raw_pattern = raw_pattern
        self.annotation = annotation

    @abstractmethod
    def matches(self, entry: TreeEntry) -> bool:
        """
        Determine whether this rule applies to a filesystem entry.

        Args:
            entry: The entry to test. Its relative path uses forward slashes and is
                relative to the repository root.

        Returns:
            bool: True if the entry is matched by this rule.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.raw_pattern!r}, annotation={self.annotation!r})"
