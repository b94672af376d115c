"""
include-cost - Static include-graph analysis for C/C++ build cost

Scans headers and sources for #include directives, resolves them against
the scanned files, and estimates how many lines each file pulls into
compilation, directly and through everything it transitively includes.
No compiler or preprocessor is run.
"""

__version__ = "0.1.0"

from .graph import AnalysisResult, FileMetrics
from .pipeline import analyze, analyze_corpus, run_analysis
from .scanning import SourceFile

__all__ = [
    "analyze",  # Main entry point
    "run_analysis",
    "analyze_corpus",
    "AnalysisResult",
    "FileMetrics",
    "SourceFile",
]
