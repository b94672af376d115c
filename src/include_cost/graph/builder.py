"""Include graph construction from scanned directives."""

from typing import Iterable, Optional

from ..logging_config import get_logger
from ..scanning.models import SourceFile
from .models import ExternalPlaceholder, IncludeEdge, IncludeGraph
from .resolver import IncludeResolver

logger = get_logger(__name__)


def build_include_graph(
    corpus: Iterable[SourceFile], resolver: Optional[IncludeResolver] = None
) -> IncludeGraph:
    """Build the include graph for ``corpus``.

    Files are processed in identity order and each file's directives in file
    order; repeated targets collapse onto the first edge. The same set of
    files therefore always yields the same edges in the same order, whatever
    order the corpus arrives in.
    """
    files = {f.path: f for f in sorted(corpus, key=lambda f: f.path)}
    if resolver is None:
        resolver = IncludeResolver(files.values())

    adjacency: dict[str, list[IncludeEdge]] = {p: [] for p in files}
    reverse: dict[str, list[str]] = {p: [] for p in files}
    placeholders: dict[str, ExternalPlaceholder] = {}
    edge_count = 0

    for path, source in files.items():
        seen: set[str] = set()
        for directive in source.includes:
            target = resolver.resolve(directive, path)
            if isinstance(target, ExternalPlaceholder):
                node, external = target.key, True
                placeholders.setdefault(target.key, target)
            else:
                node, external = target, False

            if node in seen:
                continue
            seen.add(node)

            adjacency[path].append(IncludeEdge(source=path, target=node, external=external))
            reverse.setdefault(node, []).append(path)
            edge_count += 1

    logger.info(
        f"Built include graph: {len(files)} files, {edge_count} edges, "
        f"{len(placeholders)} unresolved includes"
    )

    return IncludeGraph(
        files=files,
        adjacency=adjacency,
        reverse=reverse,
        placeholders=dict(sorted(placeholders.items())),
        edge_count=edge_count,
    )
