"""Include graph: resolution, construction and analysis."""

from .analyzer import analyze_graph
from .builder import build_include_graph
from .models import (
    AnalysisResult,
    ExternalPlaceholder,
    FileMetrics,
    IncludeEdge,
    IncludeGraph,
    PlaceholderMetrics,
)
from .resolver import IncludeResolver

__all__ = [
    "AnalysisResult",
    "ExternalPlaceholder",
    "FileMetrics",
    "IncludeEdge",
    "IncludeGraph",
    "IncludeResolver",
    "PlaceholderMetrics",
    "analyze_graph",
    "build_include_graph",
]
