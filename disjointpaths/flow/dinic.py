"""Maximum flow via Dinic's algorithm.

Each phase labels nodes with their BFS distance from the source over arcs with
remaining capacity, then saturates the layered graph with repeated depth-first
augmentations. Per-node cursors only move forward within a phase, so the arcs
scanned across all augmentations of one phase are amortized linear. The number
of phases is bounded by the number of nodes.

The engine is a generic integer edge-capacitated solver over
``ResidualNetwork``; it knows nothing about vertex splitting.
"""

from __future__ import annotations

from collections import deque
from typing import List, Set, Tuple

from disjointpaths.flow.residual import ResidualEdge, ResidualNetwork
from disjointpaths.logging import get_logger

logger = get_logger(__name__)

_UNLABELED = -1


def max_flow(network: ResidualNetwork, source: int, sink: int) -> int:
    """Compute the maximum flow from ``source`` to ``sink``.

    The network is mutated in place: on return, residual capacities reflect
    the final flow (read it back with ``ResidualNetwork.flow``).

    Args:
        network: Residual network to saturate.
        source: Network source node index.
        sink: Network sink node index.

    Returns:
        int: Total flow value.

    Raises:
        ValueError: If ``source == sink`` or either node is out of range.
    """
    if source == sink:
        raise ValueError(f"Source and sink must differ, got {source} for both")
    num_nodes = len(network)
    for node in (source, sink):
        if not 0 <= node < num_nodes:
            raise ValueError(f"Node {node} is out of range for {num_nodes} nodes")

    adjacency = network.adjacency
    total = 0
    phases = 0
    while True:
        level = _build_levels(adjacency, source)
        if level[sink] == _UNLABELED:
            break
        phases += 1
        cursor = [0] * num_nodes
        while True:
            pushed = _augment(adjacency, level, cursor, source, sink)
            if pushed == 0:
                break
            total += pushed

    logger.debug(
        "Max flow %d -> %d: value=%d after %d phase(s)", source, sink, total, phases
    )
    return total


def residual_reachable(network: ResidualNetwork, source: int) -> Set[int]:
    """Return nodes reachable from ``source`` over arcs with remaining capacity.

    After ``max_flow`` this is the source side of a minimum cut: every forward
    arc leaving the set is saturated.
    """
    adjacency = network.adjacency
    seen = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for edge in adjacency[node]:
            if edge.capacity > 0 and edge.to not in seen:
                seen.add(edge.to)
                queue.append(edge.to)
    return seen


def _build_levels(adjacency: List[List[ResidualEdge]], source: int) -> List[int]:
    """BFS distances from ``source`` counting only arcs with positive capacity."""
    level = [_UNLABELED] * len(adjacency)
    level[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        next_level = level[node] + 1
        for edge in adjacency[node]:
            if edge.capacity > 0 and level[edge.to] == _UNLABELED:
                level[edge.to] = next_level
                queue.append(edge.to)
    return level


def _augment(
    adjacency: List[List[ResidualEdge]],
    level: List[int],
    cursor: List[int],
    source: int,
    sink: int,
) -> int:
    """Find one source-sink path in the layered graph and push its bottleneck.

    Explicit-stack depth-first search. An arc is admissible when it has
    remaining capacity and climbs exactly one level. The cursor of a node
    stays on an arc that led to the sink (it may still have capacity) and
    moves past an arc whose subtree turned out to be a dead end.

    Returns:
        int: Units pushed, or 0 when the layered graph is blocked.
    """
    path: List[Tuple[int, int]] = []
    node = source
    while True:
        if node == sink:
            pushed = min(adjacency[tail][pos].capacity for tail, pos in path)
            for tail, pos in path:
                edge = adjacency[tail][pos]
                edge.capacity -= pushed
                adjacency[edge.to][edge.rev].capacity += pushed
            return pushed

        edges = adjacency[node]
        pos = cursor[node]
        while pos < len(edges):
            edge = edges[pos]
            if edge.capacity > 0 and level[edge.to] == level[node] + 1:
                break
            pos += 1
        cursor[node] = pos

        if pos < len(edges):
            path.append((node, pos))
            node = edges[pos].to
            continue

        # Dead end: retreat and skip the arc that led here
        if not path:
            return 0
        node, pos = path.pop()
        cursor[node] = pos + 1
