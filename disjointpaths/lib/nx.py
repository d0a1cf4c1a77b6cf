"""NetworkX graph conversion utilities.

Converts between NetworkX graphs and the integer-id ``Graph`` consumed by the
flow core.

Example:
    >>> import networkx as nx
    >>> from disjointpaths.lib.nx import from_networkx
    >>> from disjointpaths import max_disjoint_paths
    >>>
    >>> G = nx.complete_graph(["a", "b", "c", "d"])
    >>> graph, node_map = from_networkx(G)
    >>> max_disjoint_paths(graph)
    3
    >>> node_map.to_name[0]
    'a'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from disjointpaths.model.graph import Graph

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer vertex ids.

    Node names (any hashable) are mapped to contiguous ids starting from 0.

    Attributes:
        to_index: Maps original node names to vertex ids
        to_name: Maps vertex ids back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in id order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, ids: List[int]) -> List[Hashable]:
        """Translate a sequence of vertex ids (e.g. a path) back to names."""
        return [self.to_name[i] for i in ids]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def from_networkx(G: NxGraph) -> Tuple[Graph, NodeMap]:
    """Convert a NetworkX graph to a ``Graph``.

    Works for DiGraph, MultiDiGraph, Graph and MultiGraph. Parallel edges of
    multigraphs are kept one by one; orientation follows ``G.is_directed()``.
    Edge attributes are ignored.

    Args:
        G: NetworkX graph.

    Returns:
        Tuple of (graph, node_map) where node_map translates vertex ids back to
        the original node names.

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    # Sorted for deterministic ids regardless of insertion order
    node_names = sorted(G.nodes(), key=str)
    node_map = NodeMap.from_names(node_names)

    edges = [(node_map.to_index[u], node_map.to_index[v]) for u, v in G.edges()]
    graph = Graph(
        vertices=list(range(len(node_names))),
        edges=edges,
        directed=G.is_directed(),
    )
    return graph, node_map


def to_networkx(graph: Graph, node_map: Optional[NodeMap] = None) -> NxGraph:
    """Convert a ``Graph`` back to a NetworkX multigraph.

    Args:
        graph: Graph to convert.
        node_map: Optional NodeMap to restore original node names. Without it
            nodes keep their integer ids.

    Returns:
        nx.MultiDiGraph for directed graphs, nx.MultiGraph otherwise.
    """
    import networkx as nx

    G = nx.MultiDiGraph() if graph.directed else nx.MultiGraph()

    def name(vertex_id: int) -> Hashable:
        if node_map is None:
            return vertex_id
        return node_map.to_name.get(vertex_id, vertex_id)

    G.add_nodes_from(name(v) for v in graph.vertices)
    for u, v in graph.edges:
        G.add_edge(name(u), name(v))
    return G
