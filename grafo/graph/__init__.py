"""
Graph module for Grafo.

This module provides the storage layer (vertex registry and adjacency
store) and the DirectedGraph mutation API built on top of it.
"""

from grafo.graph.digraph import DirectedGraph, build_graph
from grafo.graph.store import AdjacencyStore, VertexRegistry

__all__ = [
    "DirectedGraph",
    "build_graph",
    "AdjacencyStore",
    "VertexRegistry",
]
