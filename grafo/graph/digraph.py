"""
Directed Graph for Grafo

This module provides the mutation API over the storage layer: inserting and
removing vertices and edges while keeping the vertex registry and the
adjacency store consistent with each other.

Design Decisions:
    - Every outcome is reported as a value (StatusKind), never raised
    - Each mutation either applies fully or leaves the graph untouched
    - No module-level state; every DirectedGraph is independent

Graph Properties:
    - Directed and unweighted
    - Self-loops and parallel edges allowed
    - Edge insertion order per vertex is preserved
    - Vertex listing is ascending by identifier unless asked otherwise
"""

import logging
from typing import Hashable, Iterable, Iterator, Optional

from grafo.graph.store import AdjacencyStore, VertexRegistry
from grafo.models import Edge, OperationResult, StatusKind, VertexOrder

logger = logging.getLogger(__name__)


class DirectedGraph:
    """
    A directed graph stored as a vertex registry plus adjacency lists.

    Provides a clean interface for:
    - Adding and removing vertices
    - Adding and removing directed edges
    - Reading vertices, successors and the full adjacency relation
    - Checking the registry/adjacency invariants

    Usage:
        graph = DirectedGraph()
        graph.insert_vertex("A")
        graph.insert_vertex("B")
        graph.insert_edge("A", "B")
        for source, targets in graph.adjacency():
            print(source, targets)
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._registry = VertexRegistry()
        self._adjacency = AdjacencyStore()

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, vertex_id: Hashable) -> bool:
        return vertex_id in self._registry

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.size()}, edges={self.edge_count})"

    @property
    def edge_count(self) -> int:
        """Return the number of edges, parallel copies included."""
        return self._adjacency.edge_count

    def size(self) -> int:
        """Return the number of registered vertices."""
        return len(self._registry)

    def has_vertex(self, vertex_id: Hashable) -> bool:
        return vertex_id in self._registry

    # Vertices

    def insert_vertex(self, vertex_id: Hashable) -> OperationResult:
        """
        Register a vertex and give it an empty adjacency sequence.

        Args:
            vertex_id: Identifier of the new vertex

        Returns:
            OK, or ALREADY_EXISTS if the identifier is taken
        """
        vertex = self._registry.add(vertex_id)
        if vertex is None:
            return OperationResult(
                StatusKind.ALREADY_EXISTS, f"Vertex {vertex_id} already exists."
            )

        self._adjacency.add_vertex(vertex.index)
        logger.debug("Inserted vertex %r at index %d", vertex_id, vertex.index)
        return OperationResult(StatusKind.OK, f"Vertex {vertex_id} inserted.")

    def remove_vertex(self, vertex_id: Hashable) -> OperationResult:
        """
        Remove a vertex together with all of its incident edges.

        The vertex's own sequence goes first, then every remaining sequence
        is filtered for edges pointing at it, then its registry slot is
        invalidated. O(V+E).

        Args:
            vertex_id: Identifier of the vertex to remove

        Returns:
            OK with the number of edges dropped, or NOT_FOUND
        """
        vertex = self._registry.get(vertex_id)
        if vertex is None:
            return OperationResult(
                StatusKind.NOT_FOUND, f"Vertex {vertex_id} does not exist."
            )

        dropped = self._adjacency.drop_vertex(vertex.index)
        self._registry.remove(vertex_id)
        logger.debug("Removed vertex %r and %d incident edge(s)", vertex_id, dropped)
        return OperationResult(StatusKind.OK, f"Vertex {vertex_id} removed.", count=dropped)

    # Edges

    def insert_edge(self, source_id: Hashable, target_id: Hashable) -> OperationResult:
        """
        Append a directed edge to the source vertex's sequence.

        Parallel edges are not deduplicated and self-loops are accepted.

        Returns:
            OK, or INVALID_ENDPOINT if either vertex is not registered
        """
        source = self._registry.get(source_id)
        target = self._registry.get(target_id)
        if source is None or target is None:
            return _invalid_endpoint(source_id, target_id)

        self._adjacency.append(Edge(source=source.index, target=target.index))
        logger.debug("Inserted edge %r -> %r", source_id, target_id)
        return OperationResult(
            StatusKind.OK, f"Edge from {source_id} to {target_id} inserted.", count=1
        )

    def remove_edge(self, source_id: Hashable, target_id: Hashable) -> OperationResult:
        """
        Remove every edge from source to target.

        All parallel copies go at once. Finding none to remove is not an
        error: the result is OK with a count of 0.

        Returns:
            OK with the number of edges removed, or INVALID_ENDPOINT
        """
        source = self._registry.get(source_id)
        target = self._registry.get(target_id)
        if source is None or target is None:
            return _invalid_endpoint(source_id, target_id)

        removed = self._adjacency.remove_between(source.index, target.index)
        logger.debug("Removed %d edge(s) %r -> %r", removed, source_id, target_id)
        return OperationResult(
            StatusKind.OK, f"Edge from {source_id} to {target_id} removed.", count=removed
        )

    def clear_all(self) -> OperationResult:
        """Remove every vertex and edge, returning to the initial state."""
        vertices, edges = self.size(), self.edge_count
        self._adjacency.clear()
        self._registry.clear()
        logger.debug("Cleared %d vertex(es) and %d edge(s)", vertices, edges)
        return OperationResult(StatusKind.OK, "Graph cleared.", count=edges)

    # Read views

    def vertices(self, order: VertexOrder = VertexOrder.SORTED) -> list:
        """Return vertex identifiers in the requested order."""
        return [vertex.id for vertex in self._registry.ordered(order)]

    def successors(self, vertex_id: Hashable) -> list:
        """
        Return destination identifiers of a vertex's outgoing edges.

        Destinations appear in edge insertion order, once per parallel edge.
        An unknown vertex has no successors.
        """
        vertex = self._registry.get(vertex_id)
        if vertex is None:
            return []
        return [
            self._registry.at(edge.target).id
            for edge in self._adjacency.edges_from(vertex.index)
        ]

    def adjacency(self, order: VertexOrder = VertexOrder.SORTED) -> list[tuple]:
        """
        Return the full adjacency relation.

        Returns:
            List of (vertex id, [destination ids]) pairs, one per vertex,
            vertices in the requested order
        """
        return [
            (vertex.id, self.successors(vertex.id))
            for vertex in self._registry.ordered(order)
        ]

    def edges(self, order: VertexOrder = VertexOrder.SORTED) -> Iterator[tuple]:
        """
        Iterate over (source id, target id) pairs.

        Sources follow the requested vertex order; edges of one source
        follow insertion order.
        """
        for source_id, targets in self.adjacency(order):
            for target_id in targets:
                yield source_id, target_id

    def validate(self) -> list[str]:
        """
        Check the registry/adjacency invariants.

        Returns:
            Human-readable descriptions of every violation (empty if none)
        """
        problems: list[str] = []
        live = {vertex.index for vertex in self._registry}

        for index in live:
            if index not in self._adjacency:
                problems.append(f"vertex slot {index} has no adjacency sequence")

        for index in self._adjacency.indices():
            if index not in live:
                problems.append(f"orphaned adjacency sequence for slot {index}")
                continue
            for edge in self._adjacency.edges_from(index):
                if edge.source != index:
                    problems.append(f"edge {edge} stored under slot {index}")
                if edge.target not in live:
                    problems.append(f"edge {edge} points at a removed vertex")

        if problems:
            logger.debug("Graph validation found %d problem(s)", len(problems))
        return problems


def _invalid_endpoint(source_id: Hashable, target_id: Hashable) -> OperationResult:
    return OperationResult(
        StatusKind.INVALID_ENDPOINT,
        f"One or both vertices do not exist ({source_id}, {target_id}).",
    )


def build_graph(
    vertices: Iterable[Hashable],
    edges: Optional[Iterable[tuple]] = None,
) -> DirectedGraph:
    """
    Build a DirectedGraph from vertex identifiers and edge pairs.

    Vertices are inserted first, in the given order, then edges. Duplicate
    vertices and edges with unknown endpoints are skipped exactly as the
    mutation API reports them.

    Args:
        vertices: Identifiers to insert
        edges: (source, target) pairs to insert

    Returns:
        The populated graph

    Example:
        >>> graph = build_graph("ABC", [("A", "B"), ("A", "C"), ("B", "C")])
        >>> graph.size()
        3
    """
    graph = DirectedGraph()

    for vertex_id in vertices:
        graph.insert_vertex(vertex_id)

    for source_id, target_id in edges or ():
        result = graph.insert_edge(source_id, target_id)
        if not result.ok:
            logger.debug("Skipped edge %r -> %r: %s", source_id, target_id, result.message)

    return graph
