"""
Grafo Engine

Directed graph container with vertex/edge mutation, breadth-first and
depth-first traversal, and export to Graphviz DOT.
"""

from grafo.graph import DirectedGraph, build_graph
from grafo.models import OperationResult, StatusKind, TraversalResult, VertexOrder

__all__ = [
    "DirectedGraph",
    "build_graph",
    "OperationResult",
    "StatusKind",
    "TraversalResult",
    "VertexOrder",
]
__version__ = "0.1.0"
