"""Repository tree generation utilities.

This package renders a source repository as an annotated tree suitable for
humans and Large Language Models (LLMs). Ignored directories are marked with the
reason recorded in the ignore-rule file, and source files are annotated with the
local modules they import.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("repo2tree")
except PackageNotFoundError:
    __version__ = "unknown"
