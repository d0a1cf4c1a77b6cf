"""Path decomposition and minimum vertex separators for a single pair.

Both read the final residual state of one max-flow run on the split network:
paths come from walking arcs that carry flow, the separator from the residual
reachability cut.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from disjointpaths.flow.dinic import max_flow, residual_reachable
from disjointpaths.flow.split import SplitNetwork, build_split_network
from disjointpaths.model.graph import Graph, VertexID


@dataclass(frozen=True)
class PairSummary:
    """Flow analytics for one ordered pair.

    Attributes:
        paths: Number of vertex-disjoint paths.
        routes: One vertex sequence per path, source first and sink last.
        separator: Interior vertices whose removal disconnects the pair,
            in vertex order. Minimum among separators of the non-direct paths.
        direct_edges: Direct source-to-sink edges used as single-edge paths.
            No vertex separator can cut them, so
            ``len(separator) + direct_edges == paths``.
    """

    paths: int
    routes: List[List[VertexID]] = field(default_factory=list)
    separator: List[VertexID] = field(default_factory=list)
    direct_edges: int = 0


def analyze_pair(graph: Graph, source_id: VertexID, sink_id: VertexID) -> PairSummary:
    """Run one max flow and summarize paths and separator for a pair.

    Args:
        graph: Input graph.
        source_id: Source vertex.
        sink_id: Sink vertex.

    Returns:
        PairSummary: Empty summary (zero paths) when either vertex is missing.

    Raises:
        ValueError: If ``source_id == sink_id``.
    """
    split = build_split_network(graph, source_id, sink_id)
    if split is None:
        return PairSummary(paths=0)

    value = max_flow(split.network, split.source, split.sink)
    separator, direct_edges = _cut(split)
    return PairSummary(
        paths=value,
        routes=_decompose(split, value),
        separator=separator,
        direct_edges=direct_edges,
    )


def disjoint_paths(
    graph: Graph, source_id: VertexID, sink_id: VertexID
) -> List[List[VertexID]]:
    """Return a maximum family of vertex-disjoint paths between two vertices."""
    return analyze_pair(graph, source_id, sink_id).routes


def min_vertex_separator(
    graph: Graph, source_id: VertexID, sink_id: VertexID
) -> List[VertexID]:
    """Return a minimum set of interior vertices separating two vertices."""
    return analyze_pair(graph, source_id, sink_id).separator


def _cut(split: SplitNetwork) -> Tuple[List[VertexID], int]:
    network = split.network
    reachable = residual_reachable(network, split.source)

    separator = [
        vertex_id
        for vertex_id, arc in split.split_arcs.items()
        if arc[0] in reachable and network.edge(arc).to not in reachable
    ]
    direct_edges = sum(
        1
        for (tail_id, head_id), arc in split.edge_arcs
        if tail_id == split.source_id
        and head_id == split.sink_id
        and network.flow(arc) > 0
    )
    return separator, direct_edges


def _decompose(split: SplitNetwork, value: int) -> List[List[VertexID]]:
    """Peel ``value`` source-sink paths off the flow on inter-vertex arcs.

    Walks from the source along arcs with unconsumed flow. Revisiting a vertex
    closes a flow cycle, which is cut out of the current route.
    """
    network = split.network
    # out-node -> [head in-node, unconsumed units] per inter-vertex arc
    outgoing: Dict[int, List[List[int]]] = {}
    for _, arc in split.edge_arcs:
        units = network.flow(arc)
        if units > 0:
            outgoing.setdefault(arc[0], []).append([network.edge(arc).to, units])

    routes: List[List[VertexID]] = []
    for _ in range(value):
        route = [split.source_id]
        node = split.source
        while True:
            entry = next(e for e in outgoing[node] if e[1] > 0)
            entry[1] -= 1
            vertex_id = split.vertex_of(entry[0])
            if vertex_id == split.sink_id:
                route.append(vertex_id)
                break
            if vertex_id in route:
                del route[route.index(vertex_id) + 1 :]
            else:
                route.append(vertex_id)
            node = entry[0] + 1
        routes.append(route)
    return routes
