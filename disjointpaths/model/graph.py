"""Input graph model for vertex-disjoint path analysis.

The core operates on an already-validated graph: a list of unique non-negative
integer vertex ids, a list of ``(source, target)`` edges and a directed flag.
Document and NetworkX adapters build instances of ``Graph``; the core never
revalidates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

#: Opaque non-negative vertex identifier.
VertexID = int

#: Original edge as ``(source_id, target_id)``.
Edge = Tuple[VertexID, VertexID]


@dataclass
class Graph:
    """Vertex set, edge list and orientation flag.

    Parallel edges and self-loops are permitted. For undirected graphs every
    edge is symmetric for flow purposes.

    Attributes:
        vertices (List[VertexID]): Unique vertex ids in a stable order. Ids need
            not be contiguous or zero-based.
        edges (List[Edge]): Original edges as ``(source_id, target_id)``.
        directed (bool): Whether edges are one-way.
    """

    vertices: List[VertexID] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    directed: bool = False

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self.vertices

    def __iter__(self) -> Iterator[VertexID]:
        return iter(self.vertices)

    def index(self) -> Dict[VertexID, int]:
        """Map each vertex id to its position in ``vertices``.

        Returns:
            Dict[VertexID, int]: Stable local index per vertex id.
        """
        return {vertex_id: local for local, vertex_id in enumerate(self.vertices)}

    def out_arc_counts(self) -> Dict[VertexID, int]:
        """Count the flow arcs that leave each vertex.

        A directed edge contributes one arc at its source; an undirected edge
        contributes one arc at each endpoint. No pair can route more
        vertex-disjoint paths than its source has outgoing arcs.

        Returns:
            Dict[VertexID, int]: Arc count per vertex id (zero for isolated ones).
        """
        counts = {vertex_id: 0 for vertex_id in self.vertices}
        for source_id, target_id in self.edges:
            if source_id in counts:
                counts[source_id] += 1
            if not self.directed and target_id in counts:
                counts[target_id] += 1
        return counts

    def add_vertex(self, vertex_id: VertexID) -> None:
        """Append a vertex id.

        Raises:
            ValueError: If the vertex already exists.
        """
        if vertex_id in self.vertices:
            raise ValueError(f"Vertex '{vertex_id}' already exists in this graph.")
        self.vertices.append(vertex_id)

    def add_edge(self, source_id: VertexID, target_id: VertexID) -> None:
        """Append an edge between two existing vertices.

        Raises:
            ValueError: If either endpoint does not exist.
        """
        if source_id not in self.vertices:
            raise ValueError(f"Source vertex '{source_id}' does not exist.")
        if target_id not in self.vertices:
            raise ValueError(f"Target vertex '{target_id}' does not exist.")
        self.edges.append((source_id, target_id))
