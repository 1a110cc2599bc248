from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, Iterator, List


class ImportScanner(ABC):
    """
    Abstract base class for line-based import scanners.

    A scanner knows the file extensions of one language family and yields the
    module tokens referenced by each line of a source file. Scanning is a shallow
    heuristic: lines that do not fit the scanner's patterns are skipped, so
    malformed or unusual import syntax simply produces no tokens.

    Attributes:
        extensions (FrozenSet[str]): Lower-case file extensions, including the dot.

    Example:
        >>> class HashIncludeScanner(ImportScanner):
        ...     extensions = frozenset({".h"})
        ...     def scan_line(self, line):
        ...         if line.startswith("#include "):
        ...             yield line.split()[1].strip('"')
        >>> HashIncludeScanner().scan(['#include "util.h"', "int x;"])
        ['util.h']
    """

    extensions: FrozenSet[str] = frozenset()

    @abstractmethod
    def scan_line(self, line: str) -> Iterator[str]:
        """
        Yield the module tokens referenced by a single source line.

        Args:
            line: One line of source text, stripped of surrounding whitespace.

        Yields:
            Module tokens exactly as written in the source.
        """
        pass

    def scan(self, lines: Iterable[str]) -> List[str]:
        """
        Collect the module tokens referenced by a sequence of source lines.

        Args:
            lines: Lines of a source file.

        Returns:
            All tokens found, in order of appearance, duplicates included.
        """
        tokens: List[str] = []
        for line in lines:
            stripped = line.strip()
            if stripped:
                tokens.extend(self.scan_line(stripped))
        return tokens

    def handles(self, extension: str) -> bool:
        """Check whether this scanner understands files with the given extension."""
        return extension.lower() in self.extensions
