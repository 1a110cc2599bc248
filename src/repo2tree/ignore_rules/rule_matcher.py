"""First-match-wins evaluation of an ordered ignore-rule list."""

from typing import Iterator, List, Optional, Sequence

from repo2tree.types import MatchResult, PathType, TreeEntry

from .rule_compiler import CompiledRule, compile_rules, load_rules
from .rule_syntax import RuleSyntax


class RuleMatcher:
    """Decides whether filesystem entries are ignored by an ordered rule list.

    Rules are tested in file order and the first rule that matches decides the
    outcome, returning its annotation (which may be absent). An entry matched by no
    rule is not ignored. All rules of a matcher share one syntax.

    Attributes:
        rules (List[CompiledRule]): The compiled rules, in file order.
        syntax (RuleSyntax): The matching semantics of the rules.

    Example:
        >>> from repo2tree.types import TreeEntry
        >>> matcher = RuleMatcher.from_text("# build artifacts\\n/dist/\\nnode_modules\\n")
        >>> matcher.match(TreeEntry("dist", "dist", True))
        MatchResult(ignored=True, annotation='build artifacts')
        >>> matcher.match(TreeEntry("node_modules", "web/node_modules", True))
        MatchResult(ignored=True, annotation=None)
        >>> matcher.match(TreeEntry("src", "src", True))
        MatchResult(ignored=False, annotation=None)
    """

    def __init__(self, rules: Optional[Sequence[CompiledRule]] = None, syntax: RuleSyntax = RuleSyntax.GLOB) -> None:
        self.rules: List[CompiledRule] = list(rules) if rules is not None else []
        self.syntax = syntax

    @classmethod
    def from_text(cls, text: str, syntax: RuleSyntax = RuleSyntax.GLOB) -> "RuleMatcher":
        """Build a matcher from the text of an ignore-rule file."""
        return cls(compile_rules(text, syntax), syntax)

    @classmethod
    def from_file(cls, rules_file: PathType, syntax: RuleSyntax = RuleSyntax.GLOB) -> "RuleMatcher":
        """Build a matcher from an ignore-rule file; a missing file gives an empty matcher."""
        return cls(load_rules(rules_file, syntax), syntax)

    def match(self, entry: TreeEntry) -> MatchResult:
        """Test an entry against the rules.

        Args:
            entry: The entry to test.

        Returns:
            MatchResult: ``ignored`` and the first matching rule's annotation.
        """
        for rule in self.rules:
            if rule.matches(entry):
                return MatchResult(True, rule.annotation)
        return MatchResult(False, None)

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[CompiledRule]:
        return iter(self.rules)
