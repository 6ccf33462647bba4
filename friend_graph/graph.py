import dataclasses
import logging
from typing import Iterator, List, Optional, Sequence, Tuple

import networkx as nx
import numpy as np

from friend_graph.errors import (
    CapacityExceededError,
    DuplicateNameError,
    EdgeExistsError,
    EdgeNotFoundError,
    InvalidIndexError,
    InvalidNameError,
    SelfLoopError,
    VertexNotFoundError,
)

MAX_VERTICES = 20  # default vertex capacity of a graph

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Vertex:
    name: str
    # most recently added friend first
    neighbors: List[int] = dataclasses.field(default_factory=list)


class Graph:
    """Undirected friendship graph with a fixed vertex capacity.

    Vertices live in a dense table addressed by index in [0, n). Each edge is
    stored twice: in the neighbor list of both endpoints and in the symmetric
    boolean adjacency matrix. Removing a vertex compacts the table, so the
    indices of every vertex after it shift down by one.
    """

    def __init__(self, capacity: int = MAX_VERTICES):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
        self.vertices: List[Vertex] = []
        self._adj_matrix = np.zeros((capacity, capacity), dtype=bool)

    @property
    def n(self) -> int:
        return len(self.vertices)

    def __len__(self):
        return self.n

    def __contains__(self, name):
        return self.find_index(name) is not None

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __repr__(self):
        return f"Graph(n={self.n}, edges={self.number_of_edges()}, capacity={self.capacity})"

    @property
    def names(self) -> List[str]:
        return [vertex.name for vertex in self.vertices]

    @property
    def adj_matrix(self) -> np.ndarray:
        """Read-only n x n view of the adjacency matrix."""
        view = self._adj_matrix[:self.n, :self.n]
        view.flags.writeable = False
        return view

    # ----- lookup -----

    def find_index(self, name: str) -> Optional[int]:
        """Return the index of the vertex called exactly `name`, or None."""
        for i, vertex in enumerate(self.vertices):
            if vertex.name == name:
                return i
        return None

    def index_of(self, name: str) -> int:
        index = self.find_index(name)
        if index is None:
            raise VertexNotFoundError(name)
        return index

    def name_of(self, index: int) -> str:
        self._check_index(index)
        return self.vertices[index].name

    def has_edge(self, u: int, v: int) -> bool:
        self._check_index(u)
        self._check_index(v)
        return bool(self._adj_matrix[u, v])

    def neighbors(self, index: int) -> List[int]:
        self._check_index(index)
        return list(self.vertices[index].neighbors)

    def neighbor_names(self, index: int) -> List[str]:
        return [self.vertices[v].name for v in self.neighbors(index)]

    def degree(self, index: int) -> int:
        self._check_index(index)
        return len(self.vertices[index].neighbors)

    def edges(self) -> List[Tuple[int, int]]:
        """All edges as (u, v) with u < v, sorted by u then v."""
        upper = np.triu(self._adj_matrix[:self.n, :self.n], k=1)
        return [(int(u), int(v)) for u, v in np.argwhere(upper)]

    def number_of_edges(self) -> int:
        return int(self._adj_matrix[:self.n, :self.n].sum()) // 2

    def incidence_matrix(self) -> np.ndarray:
        """n x m 0/1 matrix; column e marks both endpoints of edges()[e]."""
        edges = self.edges()
        incidence = np.zeros((self.n, len(edges)), dtype=int)
        for e, (u, v) in enumerate(edges):
            incidence[u, e] = 1
            incidence[v, e] = 1
        return incidence

    # ----- mutation -----

    def insert_vertex(self, name: str) -> int:
        """Append a new vertex and return its index."""
        if not isinstance(name, str) or not name:
            raise InvalidNameError(name)
        if self.n >= self.capacity:
            raise CapacityExceededError(self.capacity)
        if self.find_index(name) is not None:
            raise DuplicateNameError(name)

        # row and column n are already clear
        self.vertices.append(Vertex(name))
        logger.debug(f"Inserted vertex {name!r} at index {self.n - 1}")
        self._debug_check()
        return self.n - 1

    def insert_edge(self, u: int, v: int):
        self._check_index(u)
        self._check_index(v)
        if u == v:
            raise SelfLoopError(u)
        if self._adj_matrix[u, v]:
            raise EdgeExistsError(u, v)

        self.vertices[u].neighbors.insert(0, v)
        self.vertices[v].neighbors.insert(0, u)
        self._adj_matrix[u, v] = self._adj_matrix[v, u] = True
        logger.debug(f"Inserted edge ({u}, {v})")
        self._debug_check()

    def insert_edge_by_name(self, name1: str, name2: str):
        u, v = self.index_of(name1), self.index_of(name2)
        self.insert_edge(u, v)

    def remove_edge(self, u: int, v: int):
        self._check_index(u)
        self._check_index(v)
        if not self._adj_matrix[u, v]:
            raise EdgeNotFoundError(u, v)

        self.vertices[u].neighbors.remove(v)
        self.vertices[v].neighbors.remove(u)
        self._adj_matrix[u, v] = self._adj_matrix[v, u] = False
        logger.debug(f"Removed edge ({u}, {v})")
        self._debug_check()

    def remove_edge_by_name(self, name1: str, name2: str):
        u, v = self.index_of(name1), self.index_of(name2)
        self.remove_edge(u, v)

    def remove_vertex(self, index: int):
        """Delete a vertex with its edges and renumber every later vertex."""
        self._check_index(index)
        n = self.n

        # 1) forget the vertex in the other neighbor lists
        for i, vertex in enumerate(self.vertices):
            if i != index:
                vertex.neighbors[:] = [v for v in vertex.neighbors if v != index]

        # 2) + 3) drop its own list and name, closing the gap in the table
        removed = self.vertices.pop(index)

        # 4) shift the matrix rows and columns after `index`
        block = self._adj_matrix[:n, :n]
        compacted = np.delete(np.delete(block, index, axis=0), index, axis=1)
        self._adj_matrix[:n, :n] = False
        self._adj_matrix[:n - 1, :n - 1] = compacted

        # 5) renumber neighbor references
        for vertex in self.vertices:
            vertex.neighbors[:] = [v - 1 if v > index else v for v in vertex.neighbors]

        logger.debug(f"Removed vertex {removed.name!r} from index {index}")
        self._debug_check()

    def remove_vertex_by_name(self, name: str):
        self.remove_vertex(self.index_of(name))

    def clear(self):
        self.vertices.clear()
        self._adj_matrix[:, :] = False

    # ----- consistency -----

    def _check_index(self, index: int):
        if not 0 <= index < self.n:
            raise InvalidIndexError(index, self.n)

    def _debug_check(self):
        if logger.isEnabledFor(logging.DEBUG):
            self.check_consistency()

    def check_consistency(self):
        """Assert that neighbor lists and the matrix describe the same graph."""
        block = self._adj_matrix[:self.n, :self.n]
        assert (block == block.T).all(), "Adjacency matrix is not symmetric"
        assert not block.diagonal().any(), "Adjacency matrix has a self-loop"
        assert not self._adj_matrix[self.n:, :].any() and not self._adj_matrix[:, self.n:].any(), \
            "Adjacency matrix has entries outside the vertex table"
        for i, vertex in enumerate(self.vertices):
            assert len(vertex.neighbors) == len(set(vertex.neighbors)), f"Vertex {i} has duplicate neighbors"
            expected = set(np.flatnonzero(block[i]).tolist())
            assert set(vertex.neighbors) == expected, \
                f"Vertex {i} neighbor list {vertex.neighbors} disagrees with matrix row {sorted(expected)}"

    # ----- networkx interop -----

    def to_networkx(self) -> nx.Graph:
        graph = nx.Graph()
        for i, vertex in enumerate(self.vertices):
            graph.add_node(i, name=vertex.name)
        graph.add_edges_from(self.edges())
        return graph

    @classmethod
    def from_networkx(cls,
                      nx_graph: nx.Graph,
                      capacity: int = MAX_VERTICES,
                      names: Optional[Sequence[str]] = None) -> "Graph":
        """Copy a networkx graph, in node order, into a new Graph.

        Node names default to the "name" node attribute, falling back to str(node).
        Edges are inserted in nx_graph.edges order.
        """
        nodes = list(nx_graph.nodes)
        if names is None:
            names = [str(nx_graph.nodes[node].get("name", node)) for node in nodes]
        if len(names) != len(nodes):
            raise ValueError(f"Expected {len(nodes)} names, got {len(names)}")

        graph = cls(capacity)
        index = {}
        for node, name in zip(nodes, names):
            index[node] = graph.insert_vertex(name)
        for u, v in nx_graph.edges:
            if u != v and not graph._adj_matrix[index[u], index[v]]:
                graph.insert_edge(index[u], index[v])
        return graph
