"""Data models for the include graph and its measurements.

Levels:
  Nodes: scanned files (SourceFile) and ExternalPlaceholder stand-ins
  Relationships: IncludeEdge, deduplicated per including file
  Measurements: FileMetrics per scanned file, gathered in AnalysisResult
"""

from dataclasses import dataclass, field

from ..scanning.models import SourceFile

# ── Nodes ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ExternalPlaceholder:
    """Stand-in for an include target that matches no scanned file.

    One placeholder exists per distinct normalized path, shared by every file
    that names it. It has no outgoing edges and costs ``code_lines`` lines.
    """

    key: str
    display: str
    system: bool = False
    code_lines: int = 1

    def __str__(self) -> str:
        return f"<{self.display}>"


# ── Relationships ──────────────────────────────────────────────────


@dataclass(frozen=True)
class IncludeEdge:
    """``source`` includes ``target``; ``external`` marks a placeholder target."""

    source: str
    target: str
    external: bool = False


@dataclass
class IncludeGraph:
    """Directed include graph over one corpus.

    ``adjacency[A]`` holds A's outgoing edges in first-seen order, at most one
    per target. ``reverse[node]`` lists the distinct files that include
    ``node`` (a file identity or a placeholder key), in corpus order.
    Placeholder keys never coincide with file identities: a placeholder only
    exists when no scanned file carries the same base name.
    """

    files: dict[str, SourceFile] = field(default_factory=dict)
    adjacency: dict[str, list[IncludeEdge]] = field(default_factory=dict)
    reverse: dict[str, list[str]] = field(default_factory=dict)
    placeholders: dict[str, ExternalPlaceholder] = field(default_factory=dict)
    edge_count: int = 0

    def in_degree(self, node: str) -> int:
        return len(self.reverse.get(node, ()))

    def targets(self, path: str) -> list[str]:
        return [edge.target for edge in self.adjacency.get(path, ())]


# ── Measurements ───────────────────────────────────────────────────


@dataclass(frozen=True)
class FileMetrics:
    """Per-file measurements.

    ``total_contribution`` is this file's code lines plus the code lines of
    every distinct file (or placeholder) reachable through includes, each
    counted once. The ``compile_cost_*`` pair spreads a header's cost over
    the translation units that pull it in; for a source file it equals the
    contribution pair.
    """

    path: str
    size_bytes: int
    text_lines: int
    code_lines: int
    is_source: bool
    direct_includes: int
    transitive_includes: int
    included_by: int
    source_includers: int
    self_contribution: int
    total_contribution: int
    compile_cost_self: int
    compile_cost_total: int
    includees: tuple[str, ...] = ()


@dataclass(frozen=True)
class PlaceholderMetrics:
    """How often an unresolved include is referenced."""

    key: str
    display: str
    system: bool
    code_lines: int
    included_by: int
    source_includers: int


@dataclass
class AnalysisResult:
    """Complete analysis of one corpus. Files are keyed and ordered by identity."""

    files: dict[str, FileMetrics] = field(default_factory=dict)
    placeholders: dict[str, PlaceholderMetrics] = field(default_factory=dict)
    most_included: list[str] = field(default_factory=list)
    edge_count: int = 0

    @property
    def sources(self) -> list[FileMetrics]:
        return [m for m in self.files.values() if m.is_source]

    @property
    def headers(self) -> list[FileMetrics]:
        return [m for m in self.files.values() if not m.is_source]

    @property
    def total_code_lines(self) -> int:
        return sum(m.code_lines for m in self.files.values())

    @property
    def total_compiled_lines(self) -> int:
        """Lines the compiler sees across every translation unit."""
        return sum(m.total_contribution for m in self.sources)

    def label(self, node: str) -> str:
        """Display name for a file identity or placeholder key."""
        placeholder = self.placeholders.get(node)
        if placeholder is not None and node not in self.files:
            return f"<{placeholder.display}>"
        return node
