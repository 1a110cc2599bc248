"""Extraction of local import references from source files.

The extractor picks a scanner by file extension, collects the module tokens the
file references and keeps only the local ones: relative tokens (starting with
``.``) are always local, and any other token is local only if a file named
``<token><extension>`` sits next to the source file. Everything else is treated
as an external library import and dropped.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from repo2tree.types import PathType

from .base_scanner import ImportScanner
from .javascript_scanner import JavaScriptImportScanner
from .python_scanner import PythonImportScanner

logger = logging.getLogger(__name__)


def format_annotation(tokens: Sequence[str]) -> Optional[str]:
    """Build the import annotation for a file, or None if it has no local imports.

    Example:
        >>> format_annotation([".util", "config"])
        'references .util, config in imports'
        >>> print(format_annotation([]))
        None
    """
    if not tokens:
        return None
    return f"references {', '.join(tokens)} in imports"


class ImportExtractor:
    """Annotates source files with the local modules they import.

    Attributes:
        scanners (List[ImportScanner]): Registered scanners, consulted in order.

    Example:
        >>> extractor = ImportExtractor()
        >>> extractor.supports(".py"), extractor.supports(".rs")
        (True, False)
        >>> extractor.extract("pkg/a.py", ".py", "from .util import helper\\nimport numpy\\n")
        'references .util in imports'
    """

    def __init__(self, scanners: Optional[Iterable[ImportScanner]] = None) -> None:
        if scanners is None:
            scanners = [PythonImportScanner(), JavaScriptImportScanner()]
        self.scanners: List[ImportScanner] = list(scanners)

    def register(self, scanner: ImportScanner) -> None:
        """Add a scanner for further languages; earlier scanners take precedence."""
        self.scanners.append(scanner)

    def scanner_for(self, extension: str) -> Optional[ImportScanner]:
        """Return the first scanner that handles the extension, if any."""
        for scanner in self.scanners:
            if scanner.handles(extension):
                return scanner
        return None

    def supports(self, extension: str) -> bool:
        """Check whether some registered scanner handles the extension."""
        return self.scanner_for(extension) is not None

    def local_tokens(self, file_path: PathType, extension: str, tokens: Iterable[str]) -> List[str]:
        """Filter tokens down to local imports, de-duplicated in first-seen order.

        Args:
            file_path: Path of the source file the tokens came from.
            extension: The source file's extension, used for sibling resolution.
            tokens: Candidate module tokens.

        Returns:
            The tokens that refer to files in the repository.
        """
        directory = Path(file_path).parent
        local: List[str] = []
        for token in tokens:
            if token in local:
                continue
            if token.startswith("."):
                local.append(token)
            elif os.path.isfile(directory / f"{token}{extension}"):
                local.append(token)
        return local

    def extract(self, file_path: PathType, extension: str, content: str) -> Optional[str]:
        """Compute the import annotation of a source file from its content.

        Args:
            file_path: Path of the source file, used to resolve sibling modules.
            extension: The file's extension, including the dot.
            content: The file's text.

        Returns:
            ``"references <tokens> in imports"`` if the file imports local modules,
            None otherwise or if the extension is not supported.
        """
        scanner = self.scanner_for(extension)
        if scanner is None:
            return None
        tokens = scanner.scan(content.splitlines())
        return format_annotation(self.local_tokens(file_path, extension, tokens))

    def extract_file(self, file_path: PathType) -> Optional[str]:
        """Read a source file and compute its import annotation.

        Only readable regular files with a supported extension are read; anything
        else, FIFOs included, yields None.

        Args:
            file_path: Path of the source file.

        Returns:
            The import annotation, or None.
        """
        path = Path(file_path)
        extension = path.suffix
        if not self.supports(extension):
            return None

        try:
            if not stat.S_ISREG(path.stat().st_mode):
                logger.debug("Skipping import tracking for non-regular file %s", path)
                return None
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                content = f.read()
        except OSError as e:
            logger.debug("Skipping import tracking for unreadable file %s: %s", path, e)
            return None

        return self.extract(path, extension, content)
