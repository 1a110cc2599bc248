"""Import scanner for JavaScript and TypeScript source files."""

import re
from typing import Iterator

from .base_scanner import ImportScanner

_REQUIRE_ASSIGNMENT = re.compile(r"=\s*require\(\s*(?P<quote>['\"])(?P<module>[^'\"]+)(?P=quote)\s*\)")
_IMPORT_FROM = re.compile(r"^import\s+.+?\s+from\s+(?P<quote>['\"])(?P<module>[^'\"]+)(?P=quote)")


class JavaScriptImportScanner(ImportScanner):
    """Scanner for CommonJS ``require`` assignments and ES ``import ... from`` lines.

    Example:
        >>> scanner = JavaScriptImportScanner()
        >>> scanner.scan([
        ...     "const fs = require('fs');",
        ...     'import { api } from "./api";',
        ...     "require('./side-effect');",
        ... ])
        ['fs', './api']
    """

    extensions = frozenset({".js", ".ts"})

    def scan_line(self, line: str) -> Iterator[str]:
        for match in _REQUIRE_ASSIGNMENT.finditer(line):
            yield match.group("module")

        import_match = _IMPORT_FROM.match(line)
        if import_match:
            yield import_match.group("module")
