"""
Core Data Models for Grafo

This module defines the canonical data structures used throughout the system:
- Vertex: A named node, addressed by a stable arena index
- Edge: A directed, unweighted connection between two vertex indices
- StatusKind: Classification of every non-fatal graph outcome
- OperationResult / TraversalResult / ExportResult: values returned to callers

These models are designed to be:
- Immutable where possible (using frozen dataclasses)
- Free of references between records (edges hold indices, not vertices)
- Clear in their semantic meaning
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Optional


class StatusKind(Enum):
    """
    Outcome of a graph operation.

    States:
        OK: The operation applied in full.

        ALREADY_EXISTS: A vertex with the requested identifier is registered.
               The graph is unchanged.

        NOT_FOUND: The requested vertex (or traversal start) is not registered.
               The graph is unchanged.

        INVALID_ENDPOINT: One or both endpoints of an edge request are not
               registered. The graph is unchanged.

        IO_FAILURE: The export destination could not be written.
    """

    OK = "ok"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    INVALID_ENDPOINT = "invalid_endpoint"
    IO_FAILURE = "io_failure"


class VertexOrder(Enum):
    """Order in which vertices are listed and exported."""

    SORTED = "sorted"
    INSERTION = "insertion"


@dataclass(frozen=True)
class Vertex:
    """
    A single vertex record stored in the registry arena.

    Attributes:
        id: The caller-facing identifier (a single character in the shell,
            any hashable and comparable value internally)
        index: Arena slot generated by the registry; never reused while the
            registry lives

    Invariants:
        - id is unique within a registry
        - index >= 0
    """

    id: Hashable
    index: int

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if self.index < 0:
            raise ValueError(f"index ({self.index}) must be >= 0")


@dataclass(frozen=True)
class Edge:
    """
    A directed edge between two arena slots.

    Edges reference vertices only through their indices, so dropping a vertex
    never leaves a dangling object behind: a filter pass over the adjacency
    sequences is all the cleanup required.

    Attributes:
        source: Index of the vertex owning this edge
        target: Index of the destination vertex

    Note:
        Self-loops (source == target) are valid, and so are parallel edges;
        two Edge values with the same endpoints are distinct entries in an
        adjacency sequence.
    """

    source: int
    target: int


@dataclass(frozen=True)
class OperationResult:
    """
    Result of a mutation on the graph.

    Attributes:
        status: Outcome classification
        message: Human-readable description of the outcome
        count: Number of edges affected, where the operation removes edges
    """

    status: StatusKind
    message: str
    count: int = 0

    @property
    def ok(self) -> bool:
        """True if the operation applied."""
        return self.status is StatusKind.OK


@dataclass
class TraversalResult:
    """
    Visitation order produced by a traversal.

    Attributes:
        status: OK, or NOT_FOUND when the start vertex is not registered
        strategy: Name of the traversal strategy that produced the order
        start: The requested start identifier
        order: Identifiers in visitation order, each exactly once
    """

    status: StatusKind
    strategy: str
    start: Any
    order: list = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if the start vertex was found."""
        return self.status is StatusKind.OK

    def __len__(self) -> int:
        return len(self.order)


@dataclass
class ExportResult:
    """
    Summary of a DOT export.

    Attributes:
        status: OK, or IO_FAILURE when the destination could not be written
        destination: Where the text was written (a path, or "<stream>")
        edge_count: Number of edge lines written
        message: Human-readable description of the outcome
    """

    status: StatusKind
    destination: str
    edge_count: int = 0
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True if the DOT text was written."""
        return self.status is StatusKind.OK
