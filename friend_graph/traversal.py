from collections import deque, namedtuple
from typing import List

import numpy as np

from friend_graph.graph import Graph

Traversal = namedtuple("Traversal", field_names=["order", "count"])


def bfs(graph: Graph, start: int) -> Traversal:
    """Breadth-first visit order from `start`.

    Neighbors are explored in adjacency list order, i.e. newest friendship
    first. A vertex is marked on enqueue so it is never queued twice. An
    out-of-range start yields an empty traversal.
    """
    if not 0 <= start < graph.n:
        return Traversal(order=[], count=0)

    visited = np.zeros(graph.n, dtype=bool)
    visited[start] = True
    queue = deque([start])
    order = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in graph.vertices[u].neighbors:
            if not visited[v]:
                visited[v] = True
                queue.append(v)

    return Traversal(order=order, count=len(order))


def dfs(graph: Graph, start: int) -> Traversal:
    """Depth-first (preorder) visit order from `start`.

    Same order as the recursive formulation, using an explicit stack of
    neighbor iterators so the depth is not bound by the interpreter.
    """
    if not 0 <= start < graph.n:
        return Traversal(order=[], count=0)

    visited = np.zeros(graph.n, dtype=bool)
    visited[start] = True
    order = [start]
    stack = [iter(graph.vertices[start].neighbors)]
    while stack:
        for v in stack[-1]:
            if not visited[v]:
                visited[v] = True
                order.append(v)
                stack.append(iter(graph.vertices[v].neighbors))
                break
        else:
            stack.pop()

    return Traversal(order=order, count=len(order))


def connected_components(graph: Graph) -> List[List[int]]:
    """Components in order of their smallest index, each in BFS order."""
    seen = np.zeros(graph.n, dtype=bool)
    components = []
    for u in range(graph.n):
        if seen[u]:
            continue
        component = bfs(graph, u).order
        seen[component] = True
        components.append(component)
    return components
