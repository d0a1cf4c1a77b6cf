"""disjointpaths: vertex-disjoint path analysis via max flow.

For a graph, computes the largest number of paths between any two distinct
vertices that share no interior vertex. Each pair is solved as a maximum flow
(Dinic) on a vertex-split network (Menger's theorem).

Primary API:
    max_disjoint_paths() - Maximum count over all ordered vertex pairs
    count_disjoint_paths() - Count for one ordered pair
    analyze_pair() - Count, concrete paths and a minimum vertex separator
    Graph - Input model (integer vertex ids, edge list, directed flag)
    from_networkx() - Convert a NetworkX graph

Example:
    from disjointpaths import Graph, max_disjoint_paths

    graph = Graph(vertices=[0, 1, 2], edges=[(0, 1), (1, 2), (0, 2)])
    max_disjoint_paths(graph)  # 2
"""

from __future__ import annotations

from disjointpaths import cli, logging
from disjointpaths._version import __version__
from disjointpaths.analysis import (
    PairResult,
    PairSummary,
    analyze_pair,
    best_pair,
    count_disjoint_paths,
    disjoint_paths,
    max_disjoint_paths,
    min_vertex_separator,
    pairwise_disjoint_paths,
)
from disjointpaths.config import ENUMERATION_CONFIG, EnumerationConfig
from disjointpaths.io import graph_from_dict, graph_to_dict, load_graph
from disjointpaths.lib.nx import NodeMap, from_networkx, to_networkx
from disjointpaths.model.graph import Graph

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    # Analysis (primary API)
    "max_disjoint_paths",
    "count_disjoint_paths",
    "best_pair",
    "pairwise_disjoint_paths",
    "analyze_pair",
    "disjoint_paths",
    "min_vertex_separator",
    # Results
    "PairResult",
    "PairSummary",
    # Configuration
    "EnumerationConfig",
    "ENUMERATION_CONFIG",
    # I/O
    "graph_from_dict",
    "graph_to_dict",
    "load_graph",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
