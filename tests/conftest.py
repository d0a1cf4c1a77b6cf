"""Shared graph fixtures.

Vertex ids are plain integers. Expected maximum counts are noted per fixture.
"""

from __future__ import annotations

from itertools import combinations
from typing import List

import pytest

from disjointpaths.model.graph import Graph


def complete_graph(ids: List[int]) -> Graph:
    """Undirected complete graph on the given ids, no self-loops."""
    return Graph(vertices=list(ids), edges=list(combinations(ids, 2)))


@pytest.fixture
def k5() -> Graph:
    # Every pair: one direct edge plus three single-relay paths => 4
    return complete_graph([0, 1, 2, 3, 4])


@pytest.fixture
def k5_k3_disconnected() -> Graph:
    # K5 on 0..4 and K3 on 10..12; cross-component pairs are 0 => 4
    k5 = complete_graph([0, 1, 2, 3, 4])
    k3 = complete_graph([10, 11, 12])
    return Graph(vertices=k5.vertices + k3.vertices, edges=k5.edges + k3.edges)


@pytest.fixture
def abcd() -> Graph:
    #   A(0) ─── B(1)
    #     \      │
    #      \     │
    #       └─── C(2) ─── D(3)
    #
    # (A, C): direct and via B => 2; D hangs off C only.
    return Graph(vertices=[0, 1, 2, 3], edges=[(0, 1), (1, 2), (0, 2), (2, 3)])


@pytest.fixture
def two_chains() -> Graph:
    # S(0) ─ x1(1) ─ T(3)
    # S(0) ─ x2(2) ─ T(3)
    return Graph(vertices=[0, 1, 2, 3], edges=[(0, 1), (1, 3), (0, 2), (2, 3)])


@pytest.fixture
def three_chains(two_chains: Graph) -> Graph:
    # two_chains plus S(0) ─ x3(4) ─ T(3)
    return Graph(
        vertices=two_chains.vertices + [4],
        edges=two_chains.edges + [(0, 4), (4, 3)],
    )


@pytest.fixture
def directed_fan() -> Graph:
    # 0 ──► 1 ──► 3 ──► 4
    # │           ▲
    # └──► 2 ─────┘
    #
    # (0, 3) => 2; nothing flows backwards.
    return Graph(
        vertices=[0, 1, 2, 3, 4],
        edges=[(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)],
        directed=True,
    )


@pytest.fixture
def seven_vertex() -> Graph:
    #        ┌── 1 ──┐
    #   0 ───┼── 2 ──┼─── 6 ─── 4 ─── 5
    #        └── 3 ──┘
    #
    # (0, 6) => 3; only vertex 6 has degree 4 => max is 3.
    return Graph(
        vertices=[0, 1, 2, 3, 4, 5, 6],
        edges=[
            (0, 1),
            (0, 2),
            (0, 3),
            (1, 6),
            (2, 6),
            (3, 6),
            (6, 4),
            (4, 5),
        ],
    )


@pytest.fixture
def make_complete():
    """Factory for undirected complete graphs over arbitrary ids."""
    return complete_graph
