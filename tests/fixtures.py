"""
Test fixtures for Grafo.

This module provides sample graphs (as vertex strings and edge lists)
and helper functions for testing the graph engine and the shell.
"""

from grafo.graph import DirectedGraph, build_graph

# A -> B, A -> C, B -> C
TRIANGLE_VERTICES = "ABC"
TRIANGLE_EDGES = [("A", "B"), ("A", "C"), ("B", "C")]

TRIANGLE_DOT = """digraph G {
    A -> B;
    A -> C;
    B -> C;
}
"""

# Two paths from A to D
DIAMOND_VERTICES = "ABCD"
DIAMOND_EDGES = [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]

# A-B-C chain, D-E feeding into A, F isolated
DISCONNECTED_VERTICES = "ABCDEF"
DISCONNECTED_EDGES = [("A", "B"), ("B", "C"), ("D", "E"), ("E", "A")]

# Cycle with a self-loop and a parallel edge
CYCLIC_VERTICES = "ABC"
CYCLIC_EDGES = [("A", "B"), ("B", "A"), ("B", "B"), ("B", "C"), ("A", "B")]

# Menu input that builds the triangle and runs a breadth-first traversal
TRIANGLE_SESSION = [
    "1", "A",
    "1", "B",
    "1", "C",
    "2", "A", "B",
    "2", "A", "C",
    "2", "B", "C",
    "8", "A",
    "X",
]


def triangle() -> DirectedGraph:
    return build_graph(TRIANGLE_VERTICES, TRIANGLE_EDGES)


def diamond() -> DirectedGraph:
    return build_graph(DIAMOND_VERTICES, DIAMOND_EDGES)


def disconnected() -> DirectedGraph:
    return build_graph(DISCONNECTED_VERTICES, DISCONNECTED_EDGES)


def cyclic() -> DirectedGraph:
    return build_graph(CYCLIC_VERTICES, CYCLIC_EDGES)


def all_edges(graph: DirectedGraph) -> list[tuple]:
    """Every (source, target) pair in the graph, via a full adjacency scan."""
    return [
        (source, target)
        for source, targets in graph.adjacency()
        for target in targets
    ]
