"""Vertex-disjoint path counts over pairs of vertices.

Every ordered pair gets its own freshly built split network; nothing is shared
between pairs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from disjointpaths.config import ENUMERATION_CONFIG, EnumerationConfig
from disjointpaths.flow.dinic import max_flow
from disjointpaths.flow.split import build_split_network
from disjointpaths.logging import get_logger
from disjointpaths.model.graph import Graph, VertexID

logger = get_logger(__name__)


@dataclass(frozen=True)
class PairResult:
    """Path count for one ordered pair.

    Attributes:
        paths: Number of vertex-disjoint paths from ``source_id`` to ``sink_id``.
        source_id: Source vertex.
        sink_id: Sink vertex.
    """

    paths: int
    source_id: VertexID
    sink_id: VertexID


def count_disjoint_paths(graph: Graph, source_id: VertexID, sink_id: VertexID) -> int:
    """Count vertex-disjoint paths from ``source_id`` to ``sink_id``.

    Args:
        graph: Input graph.
        source_id: Source vertex.
        sink_id: Sink vertex.

    Returns:
        int: Maximum number of paths sharing no interior vertex; 0 when either
        vertex is not in the graph.

    Raises:
        ValueError: If ``source_id == sink_id``.
    """
    split = build_split_network(graph, source_id, sink_id)
    if split is None:
        return 0
    return max_flow(split.network, split.source, split.sink)


def ordered_pairs(graph: Graph) -> Iterator[Tuple[VertexID, VertexID]]:
    """Yield every ordered pair of distinct vertices in vertex order."""
    for i, source_id in enumerate(graph.vertices):
        for j, sink_id in enumerate(graph.vertices):
            if i == j:
                continue
            yield source_id, sink_id


def best_pair(
    graph: Graph, config: Optional[EnumerationConfig] = None
) -> Optional[PairResult]:
    """Find the ordered pair with the most vertex-disjoint paths.

    Ties keep the first pair in enumeration order.

    Args:
        graph: Input graph.
        config: Enumeration settings; defaults to ``ENUMERATION_CONFIG``.

    Returns:
        Optional[PairResult]: Best pair, or None when the graph has fewer than
        two vertices.
    """
    config = config or ENUMERATION_CONFIG
    if len(graph.vertices) < 2:
        logger.debug("Graph has %d vertices; no pairs to evaluate", len(graph))
        return None

    upper_bound = max(graph.out_arc_counts().values())
    best: Optional[PairResult] = None
    evaluated = 0
    for source_id, sink_id in ordered_pairs(graph):
        paths = count_disjoint_paths(graph, source_id, sink_id)
        evaluated += 1
        if best is None or paths > best.paths:
            best = PairResult(paths=paths, source_id=source_id, sink_id=sink_id)
        if config.should_report(evaluated):
            logger.debug(
                "Evaluated %d pairs; best so far %d paths (%s -> %s)",
                evaluated,
                best.paths,
                best.source_id,
                best.sink_id,
            )
        if config.stop_at_upper_bound and best.paths >= upper_bound:
            logger.debug(
                "Best count %d reached the upper bound after %d pairs",
                best.paths,
                evaluated,
            )
            break

    return best


def max_disjoint_paths(graph: Graph, config: Optional[EnumerationConfig] = None) -> int:
    """Maximum vertex-disjoint path count over all ordered distinct pairs.

    Args:
        graph: Input graph.
        config: Enumeration settings; defaults to ``ENUMERATION_CONFIG``.

    Returns:
        int: The maximum, or 0 for graphs with fewer than two vertices.
    """
    result = best_pair(graph, config)
    return 0 if result is None else result.paths


def pairwise_disjoint_paths(graph: Graph) -> Dict[Tuple[VertexID, VertexID], int]:
    """Path count for every ordered pair of distinct vertices.

    Returns:
        Dict[Tuple[VertexID, VertexID], int]: ``(source_id, sink_id) -> count``.
    """
    return {
        (source_id, sink_id): count_disjoint_paths(graph, source_id, sink_id)
        for source_id, sink_id in ordered_pairs(graph)
    }
