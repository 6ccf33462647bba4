from enum import Enum

import networkx as nx
import numpy as np

from friend_graph.graph import Graph, MAX_VERTICES


class GraphType(Enum):
    """Random graph models for generated friendship networks."""
    ERDOS_RENYI = "erdos_renyi"          # params: p, optional connected
    BARABASI_ALBERT = "barabasi_albert"  # params: m


class InstanceGenerator:
    """Random friendship networks, drawn with networkx and copied into a Graph."""

    def __init__(self,
                 n_min: int,
                 n_max: int,
                 graph_type: GraphType,
                 graph_params: dict,
                 capacity: int = MAX_VERTICES,
                 max_tries: int = 1000):
        if not 1 <= n_min <= n_max:
            raise ValueError(f"Expected 1 <= n_min <= n_max, got n_min={n_min}, n_max={n_max}")
        if n_max > capacity:
            raise ValueError(f"n_max={n_max} exceeds the graph capacity ({capacity})")
        self.n_min = n_min
        self.n_max = n_max
        self.graph_type = graph_type
        self.graph_params = graph_params
        self.capacity = capacity
        self.max_tries = max_tries

    def _generate_erdos_renyi(self, n: int, rng) -> nx.Graph:
        for _ in range(self.max_tries):
            _graph = nx.erdos_renyi_graph(n, p=self.graph_params["p"], seed=rng)
            check = True
            check = check and (n == 1 or _graph.number_of_edges() > 0)
            if 'connected' in self.graph_params:
                check = check and self.graph_params['connected'] == nx.is_connected(_graph)
            if check:
                return _graph
        raise ValueError(f"No acceptable graph found in {self.max_tries} tries for {self.graph_params}")

    def generate_nx_graph(self, seed: int = None) -> nx.Graph:
        rng = np.random.RandomState(abs(seed % (2**32)) if seed is not None else None)
        n = rng.randint(self.n_min, self.n_max + 1)
        if self.graph_type == GraphType.ERDOS_RENYI:
            return self._generate_erdos_renyi(n, rng)
        elif self.graph_type == GraphType.BARABASI_ALBERT:
            return nx.barabasi_albert_graph(n, m=self.graph_params["m"], seed=rng)
        raise ValueError(f"Invalid graph_type. It must be one of {list(GraphType.__members__.keys())}")

    def generate_graph(self, seed: int = None) -> Graph:
        nx_graph = self.generate_nx_graph(seed)
        names = [f"P{node}" for node in nx_graph.nodes]
        return Graph.from_networkx(nx_graph, capacity=self.capacity, names=names)
