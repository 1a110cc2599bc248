"""Ignore rules for marking directories excluded from traversal."""

from .base_rules import BaseIgnoreRule
from .directory_rules import DirectoryNameRule
from .glob_rules import GlobPattern, GlobRule
from .rule_compiler import compile_rules, load_rules
from .rule_matcher import RuleMatcher
from .rule_syntax import RuleSyntax

__all__ = [
    "BaseIgnoreRule",
    "DirectoryNameRule",
    "GlobPattern",
    "GlobRule",
    "RuleMatcher",
    "RuleSyntax",
    "compile_rules",
    "load_rules",
]
