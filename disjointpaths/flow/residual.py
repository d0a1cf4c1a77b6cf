"""Residual network representation shared by the builder and the flow engine.

Every forward arc is stored together with a zero-capacity reverse arc in the
adjacency list of its head. Pushing ``f`` units along an arc moves ``f`` from
its capacity to the paired arc's capacity, so the sum over a pair always equals
the arc's original capacity and the reverse capacity equals the flow carried.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

#: Forward arc handle: ``(tail_node, position in adjacency[tail_node])``.
ArcRef = Tuple[int, int]


class ResidualEdge:
    """Directed residual arc.

    Attributes:
        to (int): Head node index.
        capacity (int): Remaining capacity.
        rev (int): Index of the paired arc in ``adjacency[to]``.
    """

    __slots__ = ("to", "capacity", "rev")

    def __init__(self, to: int, capacity: int, rev: int) -> None:
        self.to = to
        self.capacity = capacity
        self.rev = rev

    def __repr__(self) -> str:
        return f"ResidualEdge(to={self.to}, capacity={self.capacity}, rev={self.rev})"


class ResidualNetwork:
    """Node-indexed adjacency lists of residual arcs.

    Arc order within a node is insertion order and never changes; it decides
    which flow decomposition the engine finds, not the flow value.
    """

    def __init__(self, num_nodes: int) -> None:
        if num_nodes < 0:
            raise ValueError(f"num_nodes must be non-negative, got {num_nodes}")
        self.adjacency: List[List[ResidualEdge]] = [[] for _ in range(num_nodes)]
        self.arcs: List[ArcRef] = []

    def __len__(self) -> int:
        return len(self.adjacency)

    def add_edge(self, tail: int, head: int, capacity: int) -> ArcRef:
        """Add a forward arc and its zero-capacity reverse arc.

        Args:
            tail: Tail node index.
            head: Head node index.
            capacity: Non-negative integer capacity.

        Returns:
            ArcRef: Handle of the forward arc.

        Raises:
            ValueError: If capacity is negative.
        """
        if capacity < 0:
            raise ValueError(f"Arc capacity must be non-negative, got {capacity}")
        tail_edges = self.adjacency[tail]
        head_edges = self.adjacency[head]
        # A self-loop puts both arcs in the same list, so the reverse lands one
        # slot after the forward arc.
        forward_pos = len(tail_edges)
        reverse_pos = len(head_edges) + (1 if tail == head else 0)
        tail_edges.append(ResidualEdge(head, capacity, reverse_pos))
        head_edges.append(ResidualEdge(tail, 0, forward_pos))
        arc = (tail, forward_pos)
        self.arcs.append(arc)
        return arc

    def edge(self, arc: ArcRef) -> ResidualEdge:
        """Return the residual arc behind a handle."""
        tail, pos = arc
        return self.adjacency[tail][pos]

    def reverse(self, arc: ArcRef) -> ResidualEdge:
        """Return the paired reverse arc of a forward arc."""
        forward = self.edge(arc)
        return self.adjacency[forward.to][forward.rev]

    def flow(self, arc: ArcRef) -> int:
        """Flow currently carried by a forward arc."""
        return self.reverse(arc).capacity

    def arc_flows(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(tail, head, flow)`` for every forward arc, in insertion order."""
        for arc in self.arcs:
            yield arc[0], self.edge(arc).to, self.flow(arc)
