"""Vertex-splitting transformation.

Turns a graph plus a chosen (source, sink) pair into an edge-capacitated
residual network whose maximum flow equals the number of vertex-disjoint
paths between the pair (Menger's theorem).

Layout, for a vertex at local index ``i``::

    in(v)  = 2 * i
    out(v) = 2 * i + 1

    in(v) --[1 or unbounded]--> out(v)        one split arc per vertex
    out(u) --[unbounded]--> in(w)             one arc per edge orientation

The split arc is unit for every vertex except the chosen source and sink, so
only interior vertices of a path consume capacity. Inter-vertex arcs never
limit the flow, with one exception: an edge oriented straight from the source
to the sink is a complete path by itself and gets a single unit, so parallel
direct edges count once each. A minimum cut therefore consists of interior
split arcs and direct arcs only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from disjointpaths.flow.residual import ArcRef, ResidualNetwork
from disjointpaths.logging import get_logger
from disjointpaths.model.graph import Edge, Graph, VertexID

logger = get_logger(__name__)

#: Capacity of the split arc of an interior vertex.
VERTEX_CAPACITY = 1

#: Capacity of an arc oriented straight from the source to the sink.
DIRECT_EDGE_CAPACITY = 1


@dataclass
class SplitNetwork:
    """Residual network built for one ordered (source, sink) pair.

    Attributes:
        network (ResidualNetwork): Network with ``2 * V`` nodes.
        source (int): Network source node, ``out(source_id)``.
        sink (int): Network sink node, ``in(sink_id)``.
        source_id (VertexID): Original source vertex.
        sink_id (VertexID): Original sink vertex.
        vertices (List[VertexID]): Original ids in local index order.
        split_arcs (Dict[VertexID, ArcRef]): ``in(v) -> out(v)`` arc per vertex.
        edge_arcs (List[Tuple[Edge, ArcRef]]): Oriented original edge and its
            ``out(u) -> in(w)`` arc; undirected edges appear once per orientation.
    """

    network: ResidualNetwork
    source: int
    sink: int
    source_id: VertexID
    sink_id: VertexID
    vertices: List[VertexID]
    split_arcs: Dict[VertexID, ArcRef] = field(default_factory=dict)
    edge_arcs: List[Tuple[Edge, ArcRef]] = field(default_factory=list)

    def in_node(self, vertex_id: VertexID) -> int:
        """Return the network node that receives arcs into a vertex."""
        return self.split_arcs[vertex_id][0]

    def out_node(self, vertex_id: VertexID) -> int:
        """Return the network node that sends arcs out of a vertex."""
        return self.in_node(vertex_id) + 1

    def vertex_of(self, node: int) -> VertexID:
        """Return the original vertex id that owns a network node."""
        return self.vertices[node // 2]


def unbounded_capacity(graph: Graph) -> int:
    """Capacity that no feasible flow on ``graph`` can reach.

    Every path either crosses a unit interior vertex or uses a unit direct
    edge, so the flow never exceeds ``V + E`` and this value stays above it.
    """
    return len(graph.vertices) + 2 * len(graph.edges) + 1


def build_split_network(
    graph: Graph, source_id: VertexID, sink_id: VertexID
) -> Optional[SplitNetwork]:
    """Build the split network for an ordered pair of vertices.

    Args:
        graph: Graph to transform. It is not modified.
        source_id: Original source vertex.
        sink_id: Original sink vertex.

    Returns:
        Optional[SplitNetwork]: The network, or None when either endpoint is
        not in the vertex set (no path is possible).

    Raises:
        ValueError: If ``source_id == sink_id``.
    """
    if source_id == sink_id:
        raise ValueError(
            f"Source and sink must be distinct vertices, got '{source_id}' for both"
        )

    index = graph.index()
    missing = [v for v in (source_id, sink_id) if v not in index]
    if missing:
        logger.debug(
            "Pair (%s, %s) references unknown vertices %s; treating as unreachable",
            source_id,
            sink_id,
            missing,
        )
        return None

    unbounded = unbounded_capacity(graph)
    network = ResidualNetwork(2 * len(index))

    split_arcs: Dict[VertexID, ArcRef] = {}
    for vertex_id, local in index.items():
        if vertex_id == source_id or vertex_id == sink_id:
            capacity = unbounded
        else:
            capacity = VERTEX_CAPACITY
        split_arcs[vertex_id] = network.add_edge(2 * local, 2 * local + 1, capacity)

    edge_arcs: List[Tuple[Edge, ArcRef]] = []
    for tail_id, head_id in graph.edges:
        orientations = [(tail_id, head_id)]
        if not graph.directed:
            orientations.append((head_id, tail_id))
        for u, w in orientations:
            if u == source_id and w == sink_id:
                capacity = DIRECT_EDGE_CAPACITY
            else:
                capacity = unbounded
            arc = network.add_edge(2 * index[u] + 1, 2 * index[w], capacity)
            edge_arcs.append(((u, w), arc))

    return SplitNetwork(
        network=network,
        source=2 * index[source_id] + 1,
        sink=2 * index[sink_id],
        source_id=source_id,
        sink_id=sink_id,
        vertices=list(graph.vertices),
        split_arcs=split_arcs,
        edge_arcs=edge_arcs,
    )
