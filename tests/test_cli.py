"""
Tests for the CLI module.

Tests the interactive menu shell and the `grafo` command.
"""

import io

import pytest
from rich.console import Console
from typer.testing import CliRunner

from grafo.config import ShellSettings
from grafo.graph import DirectedGraph
from grafo.models import VertexOrder
from grafo_cli.main import app
from grafo_cli.menu import MenuOption, Shell, lines_reader, parse_option
from tests.fixtures import TRIANGLE_DOT, TRIANGLE_SESSION

runner = CliRunner()


def run_session(lines, settings=None, graph=None, width=200):
    """Run a shell over the given input lines and return (graph, output lines)."""
    console = Console(file=io.StringIO(), width=width, color_system=None, force_terminal=False)
    graph = graph if graph is not None else DirectedGraph()
    shell = Shell(graph, settings or ShellSettings(), lines_reader(lines, console), console)
    shell.run()
    return graph, console.file.getvalue().splitlines()


class TestParseOption:
    """Tests for menu option parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1", MenuOption.INSERT_VERTEX),
            (" 9 \n", MenuOption.DEPTH_FIRST),
            ("A", MenuOption.EXPORT),
            ("a", MenuOption.EXPORT),
            ("x", MenuOption.QUIT),
        ],
    )
    def test_valid_options(self, text, expected):
        """Test that option characters map to menu entries."""
        assert parse_option(text) is expected

    @pytest.mark.parametrize("text", ["", "0", "B", "12", "insert", None])
    def test_invalid_options(self, text):
        """Test that anything else is rejected."""
        assert parse_option(text) is None


class TestShell:
    """Tests for the menu loop."""

    def test_triangle_session(self):
        """Test building a graph and traversing it from the menu."""
        graph, output = run_session(TRIANGLE_SESSION)

        assert graph.size() == 3
        assert graph.edge_count == 3
        assert "Vertex A inserted." in output
        assert "Edge from A to B inserted." in output
        assert "A B C" in output
        assert output[-1] == "Exiting..."

    def test_depth_first(self):
        """Test the depth-first option."""
        _, output = run_session(TRIANGLE_SESSION[:-3] + ["9", "A", "X"])

        assert "A C B" in output

    def test_size_and_adjacency(self):
        """Test the size and adjacency listing options."""
        _, output = run_session(TRIANGLE_SESSION[:-3] + ["3", "4", "X"])

        assert "Graph size: 3" in output
        start = output.index("Adjacency list of the graph:")
        assert output[start + 1:start + 4] == ["A -> B C", "B -> C", "C ->"]

    def test_adjacency_insertion_order(self):
        """Test that the configured vertex order is used for listing."""
        settings = ShellSettings(vertex_order=VertexOrder.INSERTION)
        _, output = run_session(["1", "B", "1", "A", "4", "X"], settings)

        start = output.index("Adjacency list of the graph:")
        assert output[start + 1:start + 3] == ["B ->", "A ->"]

    def test_long_lines_are_not_wrapped(self):
        """Test that adjacency and traversal lines stay whole on a narrow console."""
        edges = ["2", "A", "A"] * 60 + ["2", "A", "B"]
        _, output = run_session(
            ["1", "A", "1", "B"] + edges + ["4", "8", "A", "X"], width=80
        )

        start = output.index("Adjacency list of the graph:")
        expected = "A -> " + " ".join(["A"] * 60 + ["B"])
        assert len(expected) > 80
        assert output[start + 1:start + 3] == [expected, "B ->"]
        assert "A B" in output

    def test_duplicate_vertex_reported(self):
        """Test that a duplicate insert is reported and the loop continues."""
        graph, output = run_session(["1", "A", "1", "A", "3", "X"])

        assert "Vertex A already exists." in output
        assert "Graph size: 1" in output
        assert graph.size() == 1

    def test_invalid_edge_reported(self):
        """Test that an edge to a missing vertex is reported."""
        graph, output = run_session(["1", "A", "2", "A", "Z", "X"])

        assert "One or both vertices do not exist (A, Z)." in output
        assert graph.successors("A") == []

    def test_remove_vertex_and_edge(self):
        """Test the removal options."""
        graph, output = run_session(TRIANGLE_SESSION[:-3] + ["6", "A", "B", "5", "C", "5", "C", "X"])

        assert "Edge from A to B removed." in output
        assert "Vertex C removed." in output
        assert "Vertex C does not exist." in output
        assert graph.adjacency() == [("A", []), ("B", [])]

    def test_clear_all(self):
        """Test the clear option."""
        graph, output = run_session(TRIANGLE_SESSION[:-3] + ["7", "3", "X"])

        assert "Graph cleared." in output
        assert "Graph size: 0" in output
        assert graph.size() == 0

    def test_traversal_missing_start(self):
        """Test that an unknown traversal start is reported."""
        _, output = run_session(["8", "Q", "9", "Q", "X"])

        assert output.count("Vertex Q does not exist.") == 2

    def test_invalid_option(self):
        """Test that an unknown option leaves the graph alone."""
        graph, output = run_session(["1", "A", "Z", "", "X"])

        assert output.count("Invalid option. Try again.") == 2
        assert graph.size() == 1

    def test_blank_identifier(self):
        """Test that an empty identifier line is reported."""
        graph, output = run_session(["1", "   ", "X"])

        assert "An identifier is required." in output
        assert graph.size() == 0

    def test_identifier_is_first_character(self):
        """Test that only the first character of the line is used."""
        graph, _ = run_session(["1", " Bob", "X"])

        assert graph.vertices() == ["B"]

    def test_end_of_input_exits(self):
        """Test that running out of input ends the loop."""
        graph, output = run_session(["1", "A", "1"])

        assert graph.vertices() == ["A"]
        assert output[-1] == "Exiting..."

    def test_export(self, tmp_path):
        """Test the export option and the render hint."""
        path = tmp_path / "out.dot"
        settings = ShellSettings(dot_path=path)

        _, output = run_session(TRIANGLE_SESSION[:-3] + ["a", "X"], settings)

        assert path.read_text(encoding="utf-8") == TRIANGLE_DOT
        assert f"DOT file generated: {path}" in output
        assert f"dot -Tpng {path} -o {tmp_path / 'out.png'}" in output

    def test_export_failure_reported(self, tmp_path):
        """Test that an unwritable export path does not end the loop."""
        settings = ShellSettings(dot_path=tmp_path / "missing" / "out.dot")

        graph, output = run_session(["1", "A", "A", "3", "X"], settings)

        assert any(line.startswith("Error opening the file") for line in output)
        assert "Graph size: 1" in output


class TestCommand:
    """Tests for the `grafo` Typer app."""

    def test_version(self):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "version 0.1.0" in result.output

    def test_shell_with_script(self, tmp_path):
        """Test driving the shell from a script file."""
        script = tmp_path / "session.txt"
        script.write_text("\n".join(TRIANGLE_SESSION[:-1] + ["A", "X"]) + "\n")
        output = tmp_path / "graph.dot"

        result = runner.invoke(
            app, ["shell", "--script", str(script), "--output", str(output), "--no-hint"]
        )

        assert result.exit_code == 0, result.output
        assert "A B C" in result.output.splitlines()
        assert output.read_text(encoding="utf-8") == TRIANGLE_DOT
        assert "dot -Tpng" not in result.output

    def test_shell_insertion_order(self, tmp_path):
        """Test the --order option."""
        script = tmp_path / "session.txt"
        script.write_text("1\nC\n1\nA\n2\nC\nA\n2\nA\nC\nA\nX\n")
        output = tmp_path / "graph.dot"

        result = runner.invoke(
            app,
            ["shell", "-s", str(script), "-o", str(output), "--order", "insertion"],
        )

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8") == "digraph G {\n    C -> A;\n    A -> C;\n}\n"

    def test_shell_rejects_unknown_log_level(self, tmp_path):
        """Test that a bad log level exits with an error."""
        script = tmp_path / "session.txt"
        script.write_text("X\n")

        result = runner.invoke(app, ["shell", "-s", str(script), "--log-level", "LOUD"])

        assert result.exit_code == 1
