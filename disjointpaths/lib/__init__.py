"""Library utilities for disjointpaths.

This package contains integration modules for external libraries.
"""

from disjointpaths.lib.nx import NodeMap, from_networkx, to_networkx

__all__ = [
    "NodeMap",
    "from_networkx",
    "to_networkx",
]
