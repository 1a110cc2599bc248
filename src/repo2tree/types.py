from os import PathLike
from typing import NamedTuple, Optional, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class TreeEntry(NamedTuple):
    """A filesystem entry as seen by the ignore-rule matcher.

    Attributes:
        name: The bare name of the entry.
        relative_path: Forward-slash path of the entry relative to the repository root.
        is_dir: True if the entry is a directory.
    """

    name: str
    relative_path: str
    is_dir: bool


class MatchResult(NamedTuple):
    """Outcome of testing an entry against an ignore-rule set.

    Attributes:
        ignored: True if some rule matched the entry.
        annotation: The annotation of the first matching rule, if it has one.
    """

    ignored: bool
    annotation: Optional[str] = None


class TreeCounts(NamedTuple):
    """File and directory totals for a tree."""

    files: int
    directories: int
