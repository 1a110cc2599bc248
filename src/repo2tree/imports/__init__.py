"""Line-based detection of local imports in source files."""

from .base_scanner import ImportScanner
from .import_extractor import ImportExtractor, format_annotation
from .javascript_scanner import JavaScriptImportScanner
from .python_scanner import PythonImportScanner

__all__ = [
    "ImportExtractor",
    "ImportScanner",
    "JavaScriptImportScanner",
    "PythonImportScanner",
    "format_annotation",
]
