"""Graph documents: JSON/YAML loading and dictionary conversion.

Document shape::

    directed: false
    vertices: [0, 1, 2]            # or [{"id": 0}, {"id": 1}, ...]
    edges:                         # or [{"source": 0, "target": 1}, ...]
      - [0, 1]
      - [1, 2]

``directed`` defaults to false. Documents are validated here so the flow core
can assume a well-formed graph.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from disjointpaths.logging import get_logger
from disjointpaths.model.graph import Edge, Graph, VertexID

logger = get_logger(__name__)


def graph_from_dict(data: Dict[str, Any]) -> Graph:
    """Build a ``Graph`` from a parsed document.

    Args:
        data: Mapping with ``vertices``, ``edges`` and optional ``directed``.

    Returns:
        Graph: Validated graph.

    Raises:
        ValueError: On a malformed document: wrong shapes, negative or
            duplicate vertex ids, or edges that reference unknown vertices.
    """
    if not isinstance(data, dict):
        raise ValueError("Graph document must be a mapping at top-level.")

    unknown = set(data) - {"directed", "vertices", "edges"}
    if unknown:
        raise ValueError(f"Unrecognized keys in graph document: {sorted(unknown)}")

    directed = data.get("directed", False)
    if not isinstance(directed, bool):
        raise ValueError("'directed' must be a boolean")

    raw_vertices = data.get("vertices", [])
    if not isinstance(raw_vertices, list):
        raise ValueError("'vertices' must be a list")
    raw_edges = data.get("edges", [])
    if not isinstance(raw_edges, list):
        raise ValueError("'edges' must be a list")

    vertices: List[VertexID] = []
    seen = set()
    for entry in raw_vertices:
        vertex_id = entry.get("id") if isinstance(entry, dict) else entry
        _check_id(vertex_id, "Vertex id")
        if vertex_id in seen:
            raise ValueError(f"Duplicate vertex id {vertex_id}")
        seen.add(vertex_id)
        vertices.append(vertex_id)

    edges: List[Edge] = []
    for entry in raw_edges:
        if isinstance(entry, dict):
            if "source" not in entry or "target" not in entry:
                raise ValueError("Each edge mapping must include 'source' and 'target'")
            source_id, target_id = entry["source"], entry["target"]
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            source_id, target_id = entry
        else:
            raise ValueError(
                f"Each edge must be a [source, target] pair or a mapping, got {entry!r}"
            )
        for endpoint in (source_id, target_id):
            _check_id(endpoint, "Edge endpoint")
            if endpoint not in seen:
                raise ValueError(f"Edge references unknown vertex {endpoint}")
        edges.append((source_id, target_id))

    logger.debug(
        "Loaded graph: %d vertices, %d edges, directed=%s",
        len(vertices),
        len(edges),
        directed,
    )
    return Graph(vertices=vertices, edges=edges, directed=directed)


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Return a document suitable for direct JSON or YAML serialization."""
    return {
        "directed": graph.directed,
        "vertices": list(graph.vertices),
        "edges": [[source_id, target_id] for source_id, target_id in graph.edges],
    }


def load_graph(path: Union[str, Path]) -> Graph:
    """Load a graph document from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file extension is unsupported or the document is
            malformed.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix == ".json":
        data = json.loads(text)
    elif suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
        if data is None:
            data = {}
    else:
        raise ValueError(
            f"Unsupported graph file extension '{path.suffix}'; use .json, .yaml or .yml"
        )
    return graph_from_dict(data)


def _check_id(value: Any, what: str) -> None:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{what} must be non-negative, got {value}")
