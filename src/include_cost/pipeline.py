"""Analysis pipeline: discover -> scan -> build graph -> measure.

Example:
    >>> from include_cost import analyze
    >>> result = analyze(["src", "include"], workers=4)
    >>> result.files["src/main.cpp"].total_contribution
    1532
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from .config import AnalysisConfig, load_config
from .graph import AnalysisResult, IncludeResolver, analyze_graph, build_include_graph
from .logging_config import get_logger
from .scanning import SourceFile, SourceFileReader, discover_files

logger = get_logger(__name__)

PathLike = Union[str, Path]


def analyze_corpus(
    corpus: Iterable[SourceFile], config: Optional[AnalysisConfig] = None
) -> AnalysisResult:
    """Resolve, build and measure an already scanned corpus.

    Raises:
        IncludeCycleError: If the corpus has an include cycle
    """
    config = config or AnalysisConfig()
    corpus = tuple(corpus)

    logger.info("Resolving include relations...")
    resolver = IncludeResolver(
        corpus,
        case_sensitive=config.case_sensitive,
        placeholder_lines=config.placeholder_lines,
    )
    graph = build_include_graph(corpus, resolver)

    logger.info("Checking circular dependencies and calculating costs...")
    return analyze_graph(graph)


def run_analysis(
    paths: Iterable[PathLike], config: Optional[AnalysisConfig] = None
) -> AnalysisResult:
    """Run the full pipeline over one or more input directories.

    Raises:
        InvalidPathError: If an input directory is missing
        FileAccessError: If any file cannot be read (no partial result)
        IncludeCycleError: If the include graph has a cycle
    """
    config = config or AnalysisConfig()

    logger.info("Discovering files...")
    files = discover_files([Path(p) for p in paths], config)

    logger.info(f"Parsing {len(files)} files...")
    corpus = SourceFileReader(config).read_all(files)

    return analyze_corpus(corpus, config)


def analyze(paths: Union[PathLike, Iterable[PathLike]] = ".", **overrides) -> AnalysisResult:
    """Analyze C/C++ include costs under ``paths``.

    Args:
        paths: A directory or several directories
        **overrides: Configuration overrides (e.g. workers=4, case_sensitive=False)

    Returns:
        AnalysisResult with one FileMetrics per scanned file
    """
    if isinstance(paths, (str, Path)):
        paths = [paths]
    return run_analysis(paths, load_config(**overrides))
