"""Rule syntax enum selecting how ignore-rule patterns are matched."""

from enum import Enum


class RuleSyntax(str, Enum):
    """Matching semantics applied to every pattern of one ignore-rule file.

    Values:
        GLOB: Glob-style path matching with ``*``, ``?``, ``/`` anchoring and ``/`` directory suffix (default)
        DIRECTORY: Exact, case-insensitive directory-name matching; directories only
    """

    GLOB = "glob"
    DIRECTORY = "directory"
