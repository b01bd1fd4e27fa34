"""
Export module for Grafo.

Serializes graphs to Graphviz DOT text and copies them into NetworkX.
"""

from grafo.export.dot import export_dot, render_dot, to_networkx

__all__ = ["export_dot", "render_dot", "to_networkx"]
