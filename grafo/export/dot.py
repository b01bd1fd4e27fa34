"""
DOT Exporter for Grafo

This module serializes the directed-edge relation of a DirectedGraph into
the Graphviz DOT digraph format.

Output Format:
    digraph G {
        A -> B;
        A -> C;
    }

    - One line per edge, parallel edges repeated
    - Four-space indent, semicolon terminator
    - Newline after the closing brace
    - Vertices without edges produce no line

Ordering:
    Source vertices follow the requested VertexOrder (ascending identifier
    by default); edges of one source follow insertion order. The same graph
    state always renders to the same bytes.
"""

import logging
from pathlib import Path
from typing import TextIO, Union

import networkx as nx

from grafo.graph import DirectedGraph
from grafo.models import ExportResult, StatusKind, VertexOrder

logger = logging.getLogger(__name__)

DOT_HEADER = "digraph G {"
DOT_FOOTER = "}"
DOT_INDENT = "    "


def render_dot(graph: DirectedGraph, order: VertexOrder = VertexOrder.SORTED) -> str:
    """
    Render a graph as DOT text.

    Args:
        graph: The graph to render
        order: Order of source vertices

    Returns:
        The complete DOT document, ending with a newline
    """
    lines = [DOT_HEADER]
    for source_id, target_id in graph.edges(order):
        lines.append(f"{DOT_INDENT}{source_id} -> {target_id};")
    lines.append(DOT_FOOTER)
    return "\n".join(lines) + "\n"


def export_dot(
    graph: DirectedGraph,
    destination: Union[str, Path, TextIO],
    order: VertexOrder = VertexOrder.SORTED,
) -> ExportResult:
    """
    Write a graph as DOT text to a file path or an open text stream.

    A destination that cannot be opened or written is reported as
    IO_FAILURE; nothing is raised and the graph is not touched.

    Args:
        graph: The graph to export
        destination: Path to (over)write, or a writable text stream
        order: Order of source vertices

    Returns:
        ExportResult describing the outcome
    """
    text = render_dot(graph, order)
    edge_count = graph.edge_count

    if hasattr(destination, "write"):
        name = getattr(destination, "name", "<stream>")
        try:
            destination.write(text)
        except (OSError, ValueError) as e:
            # closed streams raise ValueError
            logger.warning("Could not write DOT output to %s: %s", name, e)
            return ExportResult(StatusKind.IO_FAILURE, str(name), message=str(e))
        return ExportResult(
            StatusKind.OK, str(name), edge_count, f"DOT file generated: {name}"
        )

    path = Path(destination)
    try:
        # newline="\n" keeps the bytes identical across platforms
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
    except OSError as e:
        logger.warning("Could not write DOT file %s: %s", path, e)
        return ExportResult(
            StatusKind.IO_FAILURE,
            str(path),
            message=f"Error opening the file {path}: {e.strerror or e}",
        )

    logger.debug("Wrote %d edge(s) to %s", edge_count, path)
    return ExportResult(StatusKind.OK, str(path), edge_count, f"DOT file generated: {path}")


def to_networkx(graph: DirectedGraph) -> nx.MultiDiGraph:
    """
    Copy a graph into a NetworkX MultiDiGraph.

    Every vertex becomes a node (isolated vertices included) and every edge
    becomes its own keyed edge, so parallel edges survive the copy.

    Args:
        graph: The graph to copy

    Returns:
        A new MultiDiGraph; later mutations of either graph do not affect
        the other
    """
    copy = nx.MultiDiGraph()
    copy.add_nodes_from(graph.vertices(VertexOrder.INSERTION))
    copy.add_edges_from(graph.edges(VertexOrder.INSERTION))
    return copy
