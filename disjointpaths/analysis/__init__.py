"""Pair-level analyses built on the flow core."""

from disjointpaths.analysis.pairs import (
    PairResult,
    best_pair,
    count_disjoint_paths,
    max_disjoint_paths,
    ordered_pairs,
    pairwise_disjoint_paths,
)
from disjointpaths.analysis.paths import (
    PairSummary,
    analyze_pair,
    disjoint_paths,
    min_vertex_separator,
)

__all__ = [
    "PairResult",
    "PairSummary",
    "analyze_pair",
    "best_pair",
    "count_disjoint_paths",
    "disjoint_paths",
    "max_disjoint_paths",
    "min_vertex_separator",
    "ordered_pairs",
    "pairwise_disjoint_paths",
]
