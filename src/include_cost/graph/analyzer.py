"""Per-file measurements over an include graph."""

from ..exceptions import IncludeCycleError
from ..logging_config import get_logger
from .algorithms import find_cycle, in_degrees, reachable_sets, reverse_adjacency
from .models import AnalysisResult, FileMetrics, IncludeGraph, PlaceholderMetrics

logger = get_logger(__name__)


class GraphArena:
    """Integer view of an IncludeGraph.

    Files occupy ids ``0..len(files)-1`` in identity order, placeholders
    follow in key order.
    """

    def __init__(self, graph: IncludeGraph):
        self.names: list[str] = sorted(graph.files) + sorted(graph.placeholders)
        self.index: dict[str, int] = {name: i for i, name in enumerate(self.names)}
        self.file_count = len(graph.files)
        self.adjacency: list[list[int]] = [
            [self.index[t] for t in graph.targets(name)] if i < self.file_count else []
            for i, name in enumerate(self.names)
        ]
        self.lines: list[int] = [
            graph.files[name].code_lines if i < self.file_count else graph.placeholders[name].code_lines
            for i, name in enumerate(self.names)
        ]
        self.is_source: list[bool] = [
            i < self.file_count and graph.files[name].is_source for i, name in enumerate(self.names)
        ]


def analyze_graph(graph: IncludeGraph) -> AnalysisResult:
    """Compute FileMetrics for every scanned file.

    Raises:
        IncludeCycleError: If any include cycle exists; nothing is measured
    """
    arena = GraphArena(graph)

    cycle = find_cycle(arena.adjacency)
    if cycle is not None:
        names = [arena.names[i] for i in cycle]
        logger.debug(f"Cycle found: {' -> '.join(names)}")
        raise IncludeCycleError(names)

    reach = reachable_sets(arena.adjacency)
    reverse = reverse_adjacency(arena.adjacency)
    reach_up = reachable_sets(reverse)
    degree = in_degrees(arena.adjacency)
    logger.info(f"Resolved transitive includes for {len(arena.names)} nodes")

    def popularity(i: int) -> tuple[int, str]:
        return (-degree[i], arena.names[i])

    files: dict[str, FileMetrics] = {}
    for i in range(arena.file_count):
        name = arena.names[i]
        source = graph.files[name]
        self_lines = arena.lines[i]
        total = self_lines + sum(arena.lines[j] for j in reach[i])
        source_includers = sum(1 for j in reach_up[i] if arena.is_source[j])

        if source.is_source:
            cost_self, cost_total = self_lines, total
        else:
            cost_self, cost_total = self_lines * source_includers, total * source_includers

        files[name] = FileMetrics(
            path=name,
            size_bytes=source.size_bytes,
            text_lines=source.text_lines,
            code_lines=source.code_lines,
            is_source=source.is_source,
            direct_includes=len(arena.adjacency[i]),
            transitive_includes=len(reach[i]),
            included_by=degree[i],
            source_includers=source_includers,
            self_contribution=self_lines,
            total_contribution=total,
            compile_cost_self=cost_self,
            compile_cost_total=cost_total,
            includees=tuple(arena.names[j] for j in sorted(arena.adjacency[i], key=popularity)),
        )

    placeholders: dict[str, PlaceholderMetrics] = {}
    for i in range(arena.file_count, len(arena.names)):
        placeholder = graph.placeholders[arena.names[i]]
        placeholders[placeholder.key] = PlaceholderMetrics(
            key=placeholder.key,
            display=placeholder.display,
            system=placeholder.system,
            code_lines=placeholder.code_lines,
            included_by=degree[i],
            source_includers=sum(1 for j in reach_up[i] if arena.is_source[j]),
        )

    logger.info("Calculated include costs")

    return AnalysisResult(
        files=files,
        placeholders=placeholders,
        most_included=[arena.names[i] for i in sorted(range(len(arena.names)), key=popularity)],
        edge_count=graph.edge_count,
    )
