"""Import scanner for Python source files."""

import re
from typing import Iterator

from .base_scanner import ImportScanner

_IMPORT_LINE = re.compile(r"^import\s+(?P<names>.+)$")
_FROM_IMPORT_LINE = re.compile(r"^from\s+(?P<module>\.*[\w.]*)\s+import\b")
_DOTTED_NAME = re.compile(r"^[A-Za-z_][\w.]*$")


class PythonImportScanner(ImportScanner):
    """Scanner for ``import a, b`` and ``from module import name`` lines.

    ``import`` lines contribute every comma-separated dotted name, with ``as``
    aliases dropped. ``from`` lines contribute the module, including any leading
    dots of a relative import.

    Example:
        >>> scanner = PythonImportScanner()
        >>> scanner.scan(["import os, util as u", "from .helpers import load", "x = 1"])
        ['os', 'util', '.helpers']
    """

    extensions = frozenset({".py"})

    def scan_line(self, line: str) -> Iterator[str]:
        from_match = _FROM_IMPORT_LINE.match(line)
        if from_match:
            module = from_match.group("module")
            if module:
                yield module
            return

        import_match = _IMPORT_LINE.match(line)
        if not import_match:
            return

        names = import_match.group("names").split("#", 1)[0]
        for part in names.strip().strip("()").split(","):
            words = part.split()
            if words and _DOTTED_NAME.match(words[0]):
                yield words[0]
