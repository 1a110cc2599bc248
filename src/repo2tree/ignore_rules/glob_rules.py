"""Glob-style ignore rules compiled to regular expressions.

A glob rule is compiled in three small steps: the raw pattern is regex-escaped,
escaped ``*`` and ``?`` are expanded back into wildcards, and runs of consecutive
"any run of characters" wildcards (``**``) are collapsed into one. The resulting
expression is wrapped according to the pattern's anchoring and is always
case-insensitive.
"""

import re
from typing import Optional, Tuple

from pathspec.pattern import RegexPattern

from repo2tree.types import TreeEntry

from .base_rules import BaseIgnoreRule

ANY_RUN = ".*"
ANY_CHAR = "."

_ESCAPED_STAR = re.escape("*")
_ESCAPED_QUESTION = re.escape("?")
_REPEATED_ANY_RUN = re.compile(r"(?:\.\*){2,}")


def escape_pattern(pattern: str) -> str:
    """Escape every regular expression metacharacter in a glob pattern.

    Example:
        >>> escape_pattern("*.py")
        '\\\\*\\\\.py'
    """
    return re.escape(pattern)


def expand_wildcards(escaped: str) -> str:
    """Turn escaped ``*`` into "any run of characters" and escaped ``?`` into "one character".

    Example:
        >>> expand_wildcards(escape_pattern("build?/*.o"))
        'build./.*\\\\.o'
    """
    return escaped.replace(_ESCAPED_STAR, ANY_RUN).replace(_ESCAPED_QUESTION, ANY_CHAR)


def collapse_wildcards(expanded: str) -> str:
    """Collapse two or more adjacent "any run" wildcards into a single one.

    Example:
        >>> collapse_wildcards("docs/.*.*/index")
        'docs/.*/index'
    """
    return _REPEATED_ANY_RUN.sub(ANY_RUN, expanded)


def split_pattern(pattern: str) -> Tuple[bool, bool, str]:
    """Split a raw glob pattern into its anchoring flag, directory-only flag and body.

    Args:
        pattern: The raw pattern line, e.g. ``/dist/``.

    Returns:
        Tuple of ``(anchored, directory_only, body)``.

    Example:
        >>> split_pattern("/dist/")
        (True, True, 'dist')
        >>> split_pattern("*.egg-info")
        (False, False, '*.egg-info')
    """
    body = pattern.strip()
    anchored = body.startswith("/")
    directory_only = body.endswith("/")
    return anchored, directory_only, body.strip("/")


class GlobPattern(RegexPattern):
    """Compiled glob pattern matched against root-relative, forward-slash paths.

    The pattern is either anchored (it started with ``/`` and must match from the
    start of the path) or unanchored (it may start at the beginning of the path or
    right after any ``/``). Either way the match must end at the end of the path or
    be followed by ``/`` and anything else, so a pattern naming a directory also
    covers everything below it.

    Attributes:
        anchored (bool): True if the pattern only matches at the repository root.
        directory_only (bool): True if the pattern had a trailing ``/``.

    Example:
        >>> GlobPattern("/build").match_file("build/lib/x.py") is not None
        True
        >>> GlobPattern("/build").match_file("src/build") is None
        True
        >>> GlobPattern("__pycache__").match_file("src/pkg/__pycache__") is not None
        True
    """

    def __init__(self, pattern: str) -> None:
        self.anchored, self.directory_only, _ = split_pattern(pattern)
        super().__init__(pattern)

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> Tuple[Optional[str], Optional[bool]]:
        """Convert a glob pattern into a case-insensitive regular expression.

        Args:
            pattern: The raw glob pattern.

        Returns:
            Tuple of the regular expression and the include flag. Both are None for
            a pattern with no body (e.g. a lone ``/``), which never matches.
        """
        anchored, _, body = split_pattern(pattern)
        if not body:
            return None, None

        core = collapse_wildcards(expand_wildcards(escape_pattern(body)))
        prefix = "^" if anchored else "^(?:.*/)?"
        return f"(?i){prefix}{core}(?P<tail>/.*)?$", True


class GlobRule(BaseIgnoreRule):
    """Ignore rule using glob-style path matching.

    Directory-only rules (trailing ``/``) match a directory entry itself or any path
    below a matched directory, but never a plain file of the same name.

    Attributes:
        pattern (GlobPattern): The compiled pattern.

    Example:
        >>> from repo2tree.types import TreeEntry
        >>> rule = GlobRule("/dist/", "build artifacts")
        >>> rule.matches(TreeEntry("dist", "dist", True))
        True
        >>> rule.matches(TreeEntry("dist", "dist", False))
        False
        >>> rule.matches(TreeEntry("dist", "packages/dist", True))
        False
    """

    def __init__(self, raw_pattern: str, annotation: Optional[str] = None) -> None:
        super().__init__(raw_pattern, annotation)
        self.pattern = GlobPattern(raw_pattern)

    @property
    def is_valid(self) -> bool:
        """True if the pattern compiled to something that can match."""
        return self.pattern.include is not None

    def matches(self, entry: TreeEntry) -> bool:
        result = self.pattern.match_file(entry.relative_path)
        if result is None:
            return False
        if self.pattern.directory_only and not entry.is_dir:
            # A file only matches through a matched parent directory
            return result.match.group("tail") is not None
        return True
