"""Compilation of ignore-rule files into ordered rule lists.

An ignore-rule file is read line by line. Comment lines (starting with ``#``)
set a pending annotation, blank lines leave it alone, and every other line is a
pattern that takes the pending annotation with it::

    # build artifacts
    /dist/
    node_modules

Here ``/dist/`` is annotated with ``build artifacts`` and ``node_modules`` has no
annotation.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from repo2tree.types import PathType

from .directory_rules import DirectoryNameRule
from .glob_rules import GlobRule
from .rule_syntax import RuleSyntax

logger = logging.getLogger(__name__)

CompiledRule = Union[GlobRule, DirectoryNameRule]


def iter_annotated_patterns(lines: Iterable[str]) -> Iterator[Tuple[str, Optional[str]]]:
    """Pair every pattern line with the annotation of the comment preceding it.

    Args:
        lines: Lines of an ignore-rule file, with or without line endings.

    Yields:
        Tuples of ``(pattern, annotation)`` in file order.

    Example:
        >>> list(iter_annotated_patterns(["# caches", "", "*.pyc", "build"]))
        [('*.pyc', 'caches'), ('build', None)]
    """
    pending: Optional[str] = None
    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith("#"):
            pending = line.lstrip("#").strip() or None
            continue
        yield line, pending
        pending = None


def compile_rule(pattern: str, annotation: Optional[str], syntax: RuleSyntax) -> CompiledRule:
    """Compile one pattern into a rule of the requested syntax."""
    if syntax == RuleSyntax.DIRECTORY:
        return DirectoryNameRule(pattern, annotation)
    return GlobRule(pattern, annotation)


def compile_rules(text: str, syntax: RuleSyntax = RuleSyntax.GLOB) -> List[CompiledRule]:
    """Compile the text of an ignore-rule file into an ordered list of rules.

    Patterns that cannot match anything under the chosen syntax (a lone ``/``, or a
    wildcard pattern under directory syntax) are skipped with a warning.

    Args:
        text: Full content of the rule file.
        syntax: Matching semantics for every rule in the file.

    Returns:
        The compiled rules, in file order.

    Example:
        >>> rules = compile_rules("# build artifacts\\n/dist/\\nnode_modules\\n")
        >>> [(rule.raw_pattern, rule.annotation) for rule in rules]
        [('/dist/', 'build artifacts'), ('node_modules', None)]
    """
    rules: List[CompiledRule] = []
    for pattern, annotation in iter_annotated_patterns(text.splitlines()):
        rule = compile_rule(pattern, annotation, syntax)
        if not rule.is_valid:
            logger.warning("Skipping ignore rule %r: not usable with %s syntax", pattern, syntax.value)
            continue
        rules.append(rule)
    return rules


def load_rules(rules_file: PathType, syntax: RuleSyntax = RuleSyntax.GLOB) -> List[CompiledRule]:
    """Read and compile an ignore-rule file.

    A missing or unreadable file is not an error: it yields an empty rule list.

    Args:
        rules_file: Path to the ignore-rule file.
        syntax: Matching semantics for every rule in the file.

    Returns:
        The compiled rules, in file order.
    """
    path = Path(rules_file)
    if not path.exists():
        logger.debug("No ignore-rule file at %s, using an empty rule set", path)
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read ignore-rule file %s: %s", path, e)
        return []

    rules = compile_rules(text, syntax)
    logger.debug("Loaded %d ignore rule(s) from %s", len(rules), path)
    return rules
