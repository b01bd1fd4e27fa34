"""
Traversal Engine for Grafo

This module implements breadth-first and depth-first traversal over a
DirectedGraph, producing the visitation order of the vertices reachable
from a start vertex.

Frontier Discipline (shared by both strategies):
    1. Mark the start vertex visited and put it on the frontier
    2. Take a vertex off the frontier and emit it
    3. Scan its successors in edge insertion order; mark each unvisited
       one visited and put it on the frontier
    4. Repeat until the frontier is empty

Marking happens on discovery, not on emission, so a vertex reachable along
several paths is put on the frontier once and emitted once.

Depth-first uses a stack with the same discipline. Its order is therefore
the stack-based expansion order (successors come off in reverse insertion
order), which differs from recursive pre-order. Downstream consumers rely
on this order; keep it.

Complexity:
    O(V + E) time and O(V) extra space for either strategy.
"""

import logging
from collections import deque
from enum import Enum
from typing import Hashable

from grafo.graph import DirectedGraph
from grafo.models import StatusKind, TraversalResult

logger = logging.getLogger(__name__)


class TraversalStrategy(Enum):
    """Available traversal strategies."""

    BREADTH_FIRST = "bfs"
    DEPTH_FIRST = "dfs"


def breadth_first(graph: DirectedGraph, start: Hashable) -> TraversalResult:
    """
    Level-order traversal from a start vertex.

    Args:
        graph: The graph to traverse
        start: Identifier of the start vertex

    Returns:
        TraversalResult with the visitation order, or NOT_FOUND with an
        empty order if start is not registered

    Example:
        >>> from grafo.graph import build_graph
        >>> graph = build_graph("ABC", [("A", "B"), ("A", "C"), ("B", "C")])
        >>> breadth_first(graph, "A").order
        ['A', 'B', 'C']
    """
    return _search(graph, start, TraversalStrategy.BREADTH_FIRST)


def depth_first(graph: DirectedGraph, start: Hashable) -> TraversalResult:
    """
    Stack-based depth-first traversal from a start vertex.

    Example:
        >>> from grafo.graph import build_graph
        >>> graph = build_graph("ABCD", [("A", "B"), ("A", "C"), ("B", "D")])
        >>> depth_first(graph, "A").order
        ['A', 'C', 'B', 'D']
    """
    return _search(graph, start, TraversalStrategy.DEPTH_FIRST)


def traverse(
    graph: DirectedGraph,
    start: Hashable,
    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST,
) -> TraversalResult:
    """Run the traversal selected by strategy."""
    return _search(graph, start, strategy)


def _search(
    graph: DirectedGraph,
    start: Hashable,
    strategy: TraversalStrategy,
) -> TraversalResult:
    if not graph.has_vertex(start):
        logger.debug("%s from %r: start vertex not registered", strategy.value, start)
        return TraversalResult(
            status=StatusKind.NOT_FOUND,
            strategy=strategy.value,
            start=start,
        )

    frontier = deque([start])
    visited = {start}
    order = []

    # deque serves as FIFO queue for BFS and LIFO stack for DFS
    take = frontier.popleft if strategy is TraversalStrategy.BREADTH_FIRST else frontier.pop

    while frontier:
        current = take()
        order.append(current)

        for successor in graph.successors(current):
            if successor not in visited:
                visited.add(successor)
                frontier.append(successor)

    logger.debug("%s from %r visited %d vertex(es)", strategy.value, start, len(order))
    return TraversalResult(
        status=StatusKind.OK,
        strategy=strategy.value,
        start=start,
        order=order,
    )
