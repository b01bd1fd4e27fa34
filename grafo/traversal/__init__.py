"""
Traversal module for Grafo.

Breadth-first and depth-first visitation over a DirectedGraph.
"""

from grafo.traversal.search import (
    TraversalStrategy,
    breadth_first,
    depth_first,
    traverse,
)

__all__ = [
    "TraversalStrategy",
    "breadth_first",
    "depth_first",
    "traverse",
]
