import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from friend_graph.graph import Graph  # noqa: E402
from friend_graph.instances.sample import load_sample  # noqa: E402
from friend_graph.interaction import Session  # noqa: E402


def snapshot(graph: Graph):
    """Copy of everything observable about a graph, for before/after comparisons."""
    return (
        graph.names,
        [list(vertex.neighbors) for vertex in graph.vertices],
        graph.adj_matrix.copy(),
    )


def build_graph(names, edges, capacity=20) -> Graph:
    graph = Graph(capacity)
    for name in names:
        graph.insert_vertex(name)
    for name1, name2 in edges:
        graph.insert_edge_by_name(name1, name2)
    return graph


@pytest.fixture
def empty_graph():
    return Graph()


@pytest.fixture
def sample_graph():
    return load_sample(Graph())


@pytest.fixture
def path_graph():
    """A - B - C - D"""
    return build_graph("ABCD", [("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture
def session():
    return Session()
