"""Tests for the text views, pandas frames and Graphviz export."""

import re

import pytest

from conftest import build_graph
from friend_graph import display
from friend_graph.traversal import bfs, dfs

SAMPLE_DOT = """graph FriendNetwork {
  v0 [label="Alice"];
  v1 [label="Bob"];
  v2 [label="Carol"];
  v3 [label="Dave"];
  v4 [label="Eve"];
  v5 [label="Frank"];
  v0 -- v1;
  v0 -- v2;
  v1 -- v2;
  v1 -- v3;
  v2 -- v4;
  v3 -- v5;
  v4 -- v5;
}
"""


class TestFrames:
    """Tests for the labelled pandas views."""

    def test_adjacency_frame(self, sample_graph):
        frame = display.adjacency_frame(sample_graph)

        assert list(frame.index) == list(frame.columns) == sample_graph.names
        assert frame.loc["Alice", "Bob"] == 1
        assert frame.loc["Bob", "Alice"] == 1
        assert frame.loc["Alice", "Frank"] == 0
        assert frame.values.sum() == 14

    def test_incidence_frame(self, sample_graph):
        frame = display.incidence_frame(sample_graph)

        assert list(frame.columns) == ["0-1", "0-2", "1-2", "1-3", "2-4", "3-5", "4-5"]
        assert frame["3-5"].to_dict() == {
            "Alice": 0, "Bob": 0, "Carol": 0, "Dave": 1, "Eve": 0, "Frank": 1,
        }
        assert (frame.sum(axis=0) == 2).all()


class TestTextViews:
    """Tests for the console renderings."""

    def test_adjacency_list(self, sample_graph):
        text = display.format_adjacency_list(sample_graph)
        assert text.splitlines() == [
            "Adjacency list:",
            " 0: Alice -> Carol -> Bob",
            " 1: Bob -> Carol -> Dave -> Alice",
            " 2: Carol -> Bob -> Eve -> Alice",
            " 3: Dave -> Frank -> Bob",
            " 4: Eve -> Frank -> Carol",
            " 5: Frank -> Dave -> Eve",
        ]

    def test_adjacency_list_without_friends(self):
        graph = build_graph("A", [])
        assert display.format_adjacency_list(graph).splitlines()[1] == " 0: A -> NULL"

    def test_adjacency_matrix(self):
        graph = build_graph("AB", [("A", "B")])
        assert display.format_adjacency_matrix(graph) == "\n".join([
            "Adjacency matrix (0/1):",
            "      0  1",
            "   +------",
            " 0 |  0  1   A",
            " 1 |  1  0   B",
        ])

    def test_incidence_matrix(self):
        graph = build_graph("ABC", [("A", "B"), ("B", "C")])
        assert display.format_incidence_matrix(graph) == "\n".join([
            "Incidence matrix (3 vertices x 2 edges):",
            "      0  1",
            "   +------",
            " 0 |  1  0   A",
            " 1 |  1  1   B",
            " 2 |  0  1   C",
        ])

    def test_incidence_matrix_without_edges(self):
        graph = build_graph("AB", [])
        text = display.format_incidence_matrix(graph)
        assert text.startswith("Incidence matrix (2 vertices x 0 edges):")
        assert text.endswith("(no edges)")

    def test_ascii(self, sample_graph):
        sample_graph.insert_vertex("Grace")
        lines = display.format_ascii(sample_graph).splitlines()
        assert lines[0] == "ASCII view:"
        assert lines[1] == "[0] Alice -- Carol, Bob"
        assert lines[-1] == "[6] Grace -- (no friends)"

    def test_traversal_report(self, sample_graph):
        text = display.format_traversal(sample_graph, dfs(sample_graph, 0), "Alice", "DFS")
        assert text.splitlines() == [
            "DFS visit order (from Alice):",
            " 0: Alice",
            " 2: Carol",
            " 1: Bob",
            " 3: Dave",
            " 5: Frank",
            " 4: Eve",
            "Total visited: 6",
        ]

    def test_traversal_report_limit_keeps_total(self, sample_graph):
        """A limit shortens the listing but not the visited count."""
        lines = display.format_traversal(sample_graph, bfs(sample_graph, 0), "Alice", limit=2).splitlines()
        assert lines == ["BFS visit order (from Alice):", " 0: Alice", " 2: Carol", "Total visited: 6"]

    def test_traversal_report_empty(self, sample_graph):
        text = display.format_traversal(sample_graph, bfs(sample_graph, 99), "Nobody")
        assert text.splitlines()[-1] == "(none)"


class TestDot:
    """Tests for the Graphviz export."""

    def test_sample(self, sample_graph):
        assert display.to_dot(sample_graph) == SAMPLE_DOT

    def test_sample_declarations(self, sample_graph):
        """Six nodes and seven unique edges, each written low index first."""
        dot = display.to_dot(sample_graph)
        nodes = re.findall(r'^  v(\d+) \[label="[^"]*"\];$', dot, flags=re.MULTILINE)
        edges = [tuple(map(int, e)) for e in re.findall(r"^  v(\d+) -- v(\d+);$", dot, flags=re.MULTILINE)]

        assert len(nodes) == 6
        assert len(edges) == 7 == len(set(edges))
        assert all(u < v for u, v in edges)

    def test_deterministic(self, sample_graph):
        """Equal graphs built in a different order export the same bytes."""
        other = build_graph(
            ["Alice", "Bob", "Carol", "Dave", "Eve", "Frank"],
            [("Dave", "Frank"), ("Bob", "Carol"), ("Eve", "Frank"), ("Carol", "Eve"),
             ("Bob", "Dave"), ("Alice", "Carol"), ("Alice", "Bob")],
        )
        assert display.to_dot(other) == display.to_dot(sample_graph)

    def test_graph_name_and_escaping(self):
        graph = build_graph(['Say "hi"', "back\\slash"], [])
        dot = display.to_dot(graph, graph_name="Friends")
        assert dot.splitlines() == [
            "graph Friends {",
            '  v0 [label="Say \\"hi\\""];',
            '  v1 [label="back\\\\slash"];',
            "}",
        ]

    @pytest.mark.parametrize("graph_name, header", [
        ("My Friends", 'graph "My Friends" {'),
        ("class-of-2024", 'graph "class-of-2024" {'),
        ("2024", 'graph "2024" {'),
        ("graph", 'graph "graph" {'),
        ('Say "hi"', 'graph "Say \\"hi\\"" {'),
        ("Friends_2024", "graph Friends_2024 {"),
    ])
    def test_graph_name_is_quoted_unless_plain_id(self, sample_graph, graph_name, header):
        """Names that are not bare DOT identifiers are written as quoted strings."""
        assert display.to_dot(sample_graph, graph_name=graph_name).splitlines()[0] == header

    def test_empty(self, empty_graph):
        assert display.to_dot(empty_graph) == "graph FriendNetwork {\n}\n"

    def test_write_dot(self, sample_graph, tmp_path):
        path = tmp_path / "friends.dot"
        returned = display.write_dot(sample_graph, str(path))
        assert returned == str(path)
        assert path.read_text() == SAMPLE_DOT

    def test_write_dot_is_utf8(self, tmp_path):
        """The file bytes do not depend on the platform encoding."""
        graph = build_graph(["Zoë", "José", "李"], [("Zoë", "李")])
        path = tmp_path / "friends.dot"

        display.write_dot(graph, str(path))

        assert path.read_bytes() == display.to_dot(graph).encode("utf-8")
        assert b"Zo\xc3\xab" in path.read_bytes()
