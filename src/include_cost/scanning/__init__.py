"""File discovery and comment-aware include scanning."""

from .discovery import discover_files, normalize_path
from .lexer import scan_source
from .models import IncludeDirective, ScanResult, SourceFile
from .reader import SourceFileReader

__all__ = [
    "IncludeDirective",
    "ScanResult",
    "SourceFile",
    "SourceFileReader",
    "discover_files",
    "normalize_path",
    "scan_source",
]
