"""Flow core: residual networks, vertex splitting and Dinic's max flow."""

from disjointpaths.flow.dinic import max_flow, residual_reachable
from disjointpaths.flow.residual import ArcRef, ResidualEdge, ResidualNetwork
from disjointpaths.flow.split import SplitNetwork, build_split_network

__all__ = [
    "ArcRef",
    "ResidualEdge",
    "ResidualNetwork",
    "SplitNetwork",
    "build_split_network",
    "max_flow",
    "residual_reachable",
]
