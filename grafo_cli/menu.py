"""
Interactive Menu for Grafo

A line-based shell over one DirectedGraph. Each cycle prints the menu,
reads a single-character option, prompts for the identifiers that option
needs, calls exactly one graph operation and prints the outcome.

Options:
    1  Insert vertex          6  Remove edge
    2  Insert edge            7  Clear all
    3  Get size               8  Breadth-first traversal
    4  Show adjacency list    9  Depth-first traversal
    5  Remove vertex          A  Generate the DOT file
                              X  Exit

The shell holds no graph logic of its own. It is constructed with the
graph, the settings, a line reader and a rich Console, so tests can drive
it with a list of lines and capture everything it prints.
"""

import logging
from enum import Enum
from typing import Callable, Iterable, Optional

from rich.console import Console
from rich.markup import escape

from grafo.config import ShellSettings
from grafo.export import export_dot
from grafo.graph import DirectedGraph
from grafo.models import OperationResult, StatusKind, TraversalResult
from grafo.traversal import breadth_first, depth_first

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 57

# A reader takes a prompt and returns the next line, or None at end of input
LineReader = Callable[[str], Optional[str]]


class MenuOption(Enum):
    """Menu entries keyed by the character the user types."""

    INSERT_VERTEX = "1"
    INSERT_EDGE = "2"
    SIZE = "3"
    SHOW_ADJACENCY = "4"
    REMOVE_VERTEX = "5"
    REMOVE_EDGE = "6"
    CLEAR_ALL = "7"
    BREADTH_FIRST = "8"
    DEPTH_FIRST = "9"
    EXPORT = "A"
    QUIT = "X"


MENU_LABELS = {
    MenuOption.INSERT_VERTEX: "Insert vertex",
    MenuOption.INSERT_EDGE: "Insert edge",
    MenuOption.SIZE: "Get size",
    MenuOption.SHOW_ADJACENCY: "Show adjacency list",
    MenuOption.REMOVE_VERTEX: "Remove vertex",
    MenuOption.REMOVE_EDGE: "Remove edge",
    MenuOption.CLEAR_ALL: "Clear all",
    MenuOption.BREADTH_FIRST: "Breadth-first traversal",
    MenuOption.DEPTH_FIRST: "Depth-first traversal",
    MenuOption.EXPORT: "Generate the DOT file",
    MenuOption.QUIT: "Exit",
}

STATUS_STYLES = {
    StatusKind.OK: "green",
    StatusKind.ALREADY_EXISTS: "yellow",
    StatusKind.NOT_FOUND: "yellow",
    StatusKind.INVALID_ENDPOINT: "yellow",
    StatusKind.IO_FAILURE: "bold red",
}


class _InputExhausted(Exception):
    """Raised when the reader has no more lines."""


def parse_option(text: Optional[str]) -> Optional[MenuOption]:
    """
    Map a line of input to a menu option.

    Letters are accepted in either case. Returns None for anything that is
    not exactly one option character.
    """
    if text is None:
        return None
    choice = text.strip().upper()
    try:
        return MenuOption(choice)
    except ValueError:
        return None


def console_reader(console: Console) -> LineReader:
    """Read lines interactively through a rich Console."""

    def read(prompt: str) -> Optional[str]:
        try:
            return console.input(prompt)
        except EOFError:
            return None

    return read


def lines_reader(lines: Iterable[str], console: Console) -> LineReader:
    """Read lines from an iterable, printing each prompt as it goes."""
    iterator = iter(lines)

    def read(prompt: str) -> Optional[str]:
        console.print(prompt, end="", markup=False)
        try:
            line = next(iterator)
        except StopIteration:
            console.print()
            return None
        console.print(line.rstrip("\n"), markup=False, highlight=False, soft_wrap=True)
        return line

    return read


class Shell:
    """
    The interactive menu loop.

    Attributes:
        graph: The graph every option operates on
        settings: Export path, vertex order and hint options
        console: Where everything is printed

    Usage:
        shell = Shell(DirectedGraph(), ShellSettings())
        shell.run()
    """

    def __init__(
        self,
        graph: DirectedGraph,
        settings: Optional[ShellSettings] = None,
        read_line: Optional[LineReader] = None,
        console: Optional[Console] = None,
    ) -> None:
        self.graph = graph
        self.settings = settings or ShellSettings()
        self.console = console or Console()
        self._read_line = read_line or console_reader(self.console)

    def run(self) -> None:
        """Process options until the user exits or input runs out."""
        while True:
            try:
                if not self.step():
                    break
            except _InputExhausted:
                logger.debug("Input exhausted, leaving the menu loop")
                self.console.print("Exiting...")
                break

    def step(self) -> bool:
        """
        Show the menu and handle one option.

        Returns:
            False once the user chose to exit, True otherwise
        """
        self._print_menu()
        line = self._ask("Select an option: ")
        self.console.print(SEPARATOR)

        option = parse_option(line)
        if option is None:
            self.console.print("[red]Invalid option. Try again.[/red]")
            return True

        if option is MenuOption.QUIT:
            self.console.print("Exiting...")
            return False

        self.dispatch(option)
        return True

    def dispatch(self, option: MenuOption) -> None:
        """Run the graph operation behind a menu option."""
        logger.debug("Dispatching %s", option.name)

        if option is MenuOption.INSERT_VERTEX:
            vertex_id = self._ask_identifier("Enter the vertex ID (A-Z): ")
            if vertex_id is not None:
                self._report(self.graph.insert_vertex(vertex_id))

        elif option is MenuOption.INSERT_EDGE:
            endpoints = self._ask_endpoints()
            if endpoints is not None:
                self._report(self.graph.insert_edge(*endpoints))

        elif option is MenuOption.SIZE:
            self.console.print(f"Graph size: {self.graph.size()}")

        elif option is MenuOption.SHOW_ADJACENCY:
            self._print_adjacency()

        elif option is MenuOption.REMOVE_VERTEX:
            vertex_id = self._ask_identifier("Enter the ID of the vertex to remove (A-Z): ")
            if vertex_id is not None:
                self._report(self.graph.remove_vertex(vertex_id))

        elif option is MenuOption.REMOVE_EDGE:
            endpoints = self._ask_endpoints()
            if endpoints is not None:
                self._report(self.graph.remove_edge(*endpoints))

        elif option is MenuOption.CLEAR_ALL:
            self._report(self.graph.clear_all())

        elif option is MenuOption.BREADTH_FIRST:
            start = self._ask_identifier(
                "Enter the start vertex ID for the breadth-first traversal (A-Z): "
            )
            if start is not None:
                self._print_traversal(breadth_first(self.graph, start))

        elif option is MenuOption.DEPTH_FIRST:
            start = self._ask_identifier(
                "Enter the start vertex ID for the depth-first traversal (A-Z): "
            )
            if start is not None:
                self._print_traversal(depth_first(self.graph, start))

        elif option is MenuOption.EXPORT:
            self._export()

    # Input helpers

    def _ask(self, prompt: str) -> str:
        line = self._read_line(prompt)
        if line is None:
            raise _InputExhausted()
        return line

    def _ask_identifier(self, prompt: str) -> Optional[str]:
        """Read one identifier: the first non-blank character of the line."""
        text = self._ask(prompt).strip()
        if not text:
            self.console.print("[yellow]An identifier is required.[/yellow]")
            return None
        return text[0]

    def _ask_endpoints(self) -> Optional[tuple[str, str]]:
        source = self._ask_identifier("Enter the source vertex ID (A-Z): ")
        if source is None:
            return None
        target = self._ask_identifier("Enter the destination vertex ID (A-Z): ")
        if target is None:
            return None
        return source, target

    # Output helpers

    def _print_menu(self) -> None:
        self.console.print(SEPARATOR)
        for option in MenuOption:
            self.console.print(f"{option.value}. {MENU_LABELS[option]}")

    def _report(self, result: OperationResult) -> None:
        style = STATUS_STYLES[result.status]
        self.console.print(f"[{style}]{escape(result.message)}[/{style}]")

    def _print_adjacency(self) -> None:
        self.console.print("Adjacency list of the graph:")
        for vertex_id, targets in self.graph.adjacency(self.settings.vertex_order):
            line = " ".join([f"{vertex_id} ->"] + [str(target) for target in targets])
            self.console.print(line, markup=False, highlight=False, soft_wrap=True)

    def _print_traversal(self, result: TraversalResult) -> None:
        if not result.ok:
            self.console.print(f"[yellow]Vertex {escape(str(result.start))} does not exist.[/yellow]")
            return
        self.console.print(
            " ".join(str(vertex_id) for vertex_id in result.order),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def _export(self) -> None:
        self.console.print("Generating the DOT file...")
        result = export_dot(self.graph, self.settings.dot_path, self.settings.vertex_order)
        if not result.ok:
            self.console.print(
                f"[bold red]{escape(result.message or 'Export failed.')}[/bold red]",
                soft_wrap=True,
            )
            return

        self.console.print(f"[green]{escape(result.message)}[/green]", soft_wrap=True)
        if self.settings.show_render_hint:
            self.console.print(
                "Run the following command to render the DOT file as a PNG image:"
            )
            self.console.print(
                f"dot -Tpng {self.settings.dot_path} -o {self.settings.png_path}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
