"""
Grafo CLI

Command-line entry point for the directed graph shell.

Commands:
    grafo shell             Start the interactive menu on an empty graph
    grafo shell -s FILE     Feed the menu from a file of input lines

Usage:
    $ grafo shell
    $ grafo shell --output build/graph.dot --order insertion
    $ grafo shell --script session.txt
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from grafo import __version__
from grafo.config import DEFAULT_DOT_PATH, DEFAULT_LOG_LEVEL, ShellSettings
from grafo.graph import DirectedGraph
from grafo.models import VertexOrder
from grafo_cli.menu import Shell, console_reader, lines_reader

# Initialize Typer app and Rich console
app = typer.Typer(
    name="grafo",
    help="Grafo: an interactive directed graph shell",
    add_completion=False,
)
console = Console()


class OrderChoice(str, Enum):
    sorted = "sorted"
    insertion = "insertion"


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Route log records through the shared rich console."""
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        console.print(f"[bold red]Error:[/bold red] unknown log level {level!r}")
        raise typer.Exit(1)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def shell(
    output: Path = typer.Option(
        Path(DEFAULT_DOT_PATH),
        "--output",
        "-o",
        help="File written by the 'Generate the DOT file' option",
        dir_okay=False,
    ),
    order: OrderChoice = typer.Option(
        OrderChoice.sorted,
        "--order",
        help="Vertex order for the adjacency list and the DOT file",
    ),
    script: Optional[Path] = typer.Option(
        None,
        "--script",
        "-s",
        help="Read menu input from this file instead of the terminal",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    no_hint: bool = typer.Option(
        False,
        "--no-hint",
        help="Do not print the Graphviz render command after exporting",
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """
    Start the interactive menu.

    The graph starts empty and lives for the duration of the session.
    """
    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    settings = ShellSettings(
        dot_path=output,
        vertex_order=VertexOrder(order.value),
        show_render_hint=not no_hint,
    )

    if script is not None:
        try:
            lines = script.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            console.print(f"[bold red]Error:[/bold red] {e}")
            raise typer.Exit(1)
        reader = lines_reader(lines, console)
        logger.info("Reading %d input line(s) from %s", len(lines), script)
    else:
        reader = console_reader(console)

    Shell(DirectedGraph(), settings, reader, console).run()


# Version command
@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
    ),
) -> None:
    """
    Grafo: an interactive directed graph shell.
    """
    if version:
        console.print(f"[bold]Grafo[/bold] version {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()


if __name__ == "__main__":
    app()
