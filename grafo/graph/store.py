"""
Storage Layer for Grafo

This module holds the two structures every graph instance is made of:
the vertex registry and the adjacency store.

Design Decisions:
    - Vertices live in an arena keyed by a generated integer index
    - Identifiers map to indices through a plain dict (uniqueness check)
    - Edges are (source index, target index) pairs kept in per-vertex lists
    - Removing a vertex is slot invalidation plus a filter pass over the lists

Storage Properties:
    - dicts preserve insertion order, so "insertion" vertex order is free
    - Sorted vertex order is computed on demand from the identifiers
    - Edge order within a list is append order and is never rearranged
"""

import logging
from typing import Hashable, Iterator, Optional

from grafo.models import Edge, Vertex, VertexOrder

logger = logging.getLogger(__name__)


class VertexRegistry:
    """
    Arena of vertex records addressed by generated index.

    Attributes:
        _slots: Mapping from arena index to the live vertex record
        _index: Mapping from identifier to arena index
        _next_index: Next index to hand out

    Usage:
        registry = VertexRegistry()
        vertex = registry.add("A")
        registry.get("A").index == vertex.index
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._slots: dict[int, Vertex] = {}
        self._index: dict[Hashable, int] = {}
        self._next_index = 0

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, vertex_id: Hashable) -> bool:
        return vertex_id in self._index

    def __iter__(self) -> Iterator[Vertex]:
        """Iterate over live vertices in insertion order."""
        return iter(list(self._slots.values()))

    def add(self, vertex_id: Hashable) -> Optional[Vertex]:
        """
        Register a new vertex.

        Args:
            vertex_id: The identifier to register

        Returns:
            The new Vertex, or None if the identifier is already registered
        """
        if vertex_id in self._index:
            return None

        vertex = Vertex(id=vertex_id, index=self._next_index)
        self._next_index += 1
        self._slots[vertex.index] = vertex
        self._index[vertex_id] = vertex.index
        return vertex

    def get(self, vertex_id: Hashable) -> Optional[Vertex]:
        """Return the vertex registered under an identifier, if any."""
        index = self._index.get(vertex_id)
        if index is None:
            return None
        return self._slots[index]

    def at(self, index: int) -> Vertex:
        """Return the live vertex stored in an arena slot."""
        return self._slots[index]

    def remove(self, vertex_id: Hashable) -> Optional[Vertex]:
        """
        Invalidate the slot of a vertex.

        Returns:
            The removed Vertex, or None if it was not registered
        """
        index = self._index.pop(vertex_id, None)
        if index is None:
            return None
        return self._slots.pop(index)

    def ordered(self, order: VertexOrder = VertexOrder.SORTED) -> list[Vertex]:
        """
        List live vertices in the requested order.

        SORTED sorts ascending by identifier, which requires identifiers to
        be mutually comparable. INSERTION keeps registration order.
        """
        vertices = list(self._slots.values())
        if order is VertexOrder.SORTED:
            vertices.sort(key=lambda vertex: vertex.id)
        return vertices

    def clear(self) -> None:
        """Drop every vertex and restart index generation."""
        self._slots.clear()
        self._index.clear()
        self._next_index = 0


class AdjacencyStore:
    """
    Ordered outgoing-edge lists, one per registered vertex.

    The store only knows indices. Keeping one entry per live vertex is the
    job of the graph that owns both the store and the registry.
    """

    def __init__(self) -> None:
        """Initialize an empty adjacency store."""
        self._lists: dict[int, list[Edge]] = {}

    def __contains__(self, index: int) -> bool:
        return index in self._lists

    def __len__(self) -> int:
        return len(self._lists)

    def indices(self) -> list[int]:
        """Indices that own an adjacency sequence."""
        return list(self._lists)

    @property
    def edge_count(self) -> int:
        """Total number of edges, parallel copies included."""
        return sum(len(edges) for edges in self._lists.values())

    def add_vertex(self, index: int) -> None:
        """Create an empty adjacency sequence for a vertex."""
        self._lists[index] = []

    def drop_vertex(self, index: int) -> int:
        """
        Remove a vertex's own sequence and every edge pointing at it.

        Args:
            index: Arena index of the vertex being removed

        Returns:
            Number of edges dropped (outgoing plus incoming)
        """
        dropped = len(self._lists.pop(index, []))

        for source, edges in self._lists.items():
            kept = [edge for edge in edges if edge.target != index]
            if len(kept) != len(edges):
                dropped += len(edges) - len(kept)
                self._lists[source] = kept

        return dropped

    def append(self, edge: Edge) -> None:
        """Append an edge to the end of its source's sequence."""
        self._lists[edge.source].append(edge)

    def remove_between(self, source: int, target: int) -> int:
        """
        Remove every edge from source to target.

        Returns:
            Number of parallel copies removed (0 if there were none)
        """
        edges = self._lists[source]
        kept = [edge for edge in edges if edge.target != target]
        self._lists[source] = kept
        return len(edges) - len(kept)

    def edges_from(self, index: int) -> list[Edge]:
        """Outgoing edges of a vertex in insertion order."""
        return list(self._lists[index])

    def clear(self) -> None:
        """Drop every adjacency sequence."""
        self._lists.clear()
