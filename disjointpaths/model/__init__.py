"""Graph model consumed by the flow core."""

from disjointpaths.model.graph import Edge, Graph, VertexID

__all__ = ["Edge", "Graph", "VertexID"]
