"""
Settings for the Grafo shell.

Defaults live in module constants; the `grafo` command overrides them
from its options.
"""

from dataclasses import dataclass
from pathlib import Path

from grafo.models import VertexOrder

# Default export location, relative to the working directory
DEFAULT_DOT_PATH = "grafo.dot"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class ShellSettings:
    """
    Options consumed by the interactive shell.

    Attributes:
        dot_path: File the export command writes to
        vertex_order: Order used when listing adjacency and exporting
        show_render_hint: Print the Graphviz command after exporting
    """

    dot_path: Path = Path(DEFAULT_DOT_PATH)
    vertex_order: VertexOrder = VertexOrder.SORTED
    show_render_hint: bool = True

    @property
    def png_path(self) -> Path:
        """Image path suggested in the Graphviz hint."""
        return self.dot_path.with_suffix(".png")
