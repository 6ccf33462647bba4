import logging
import re
from typing import Optional

import pandas as pd

from friend_graph.graph import Graph
from friend_graph.traversal import Traversal

DEFAULT_GRAPH_NAME = "FriendNetwork"

# unquoted DOT identifier
DOT_ID = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
DOT_KEYWORDS = {"node", "edge", "graph", "digraph", "subgraph", "strict"}

logger = logging.getLogger(__name__)


def adjacency_frame(graph: Graph) -> pd.DataFrame:
    """Adjacency matrix as 0/1 ints, labelled by vertex name on both axes."""
    return pd.DataFrame(graph.adj_matrix.astype(int), index=graph.names, columns=graph.names)


def incidence_frame(graph: Graph) -> pd.DataFrame:
    """Incidence matrix labelled by vertex name (rows) and "u-v" edge keys (columns)."""
    columns = [f"{u}-{v}" for u, v in graph.edges()]
    return pd.DataFrame(graph.incidence_matrix(), index=graph.names, columns=columns)


def format_adjacency_list(graph: Graph) -> str:
    lines = ["Adjacency list:"]
    for i, vertex in enumerate(graph.vertices):
        friends = graph.neighbor_names(i)
        lines.append(f" {i}: {vertex.name} -> " + (" -> ".join(friends) if friends else "NULL"))
    return "\n".join(lines)


def _format_table(graph: Graph, title: str, table) -> str:
    n_columns = table.shape[1]
    lines = [
        title,
        "    " + "".join(f"{j:3d}" for j in range(n_columns)),
        "   +" + "---" * n_columns,
    ]
    for i, name in enumerate(graph.names):
        lines.append(f"{i:2d} |" + "".join(f"{int(x):3d}" for x in table[i]) + f"   {name}")
    return "\n".join(lines)


def format_adjacency_matrix(graph: Graph) -> str:
    return _format_table(graph, "Adjacency matrix (0/1):", graph.adj_matrix)


def format_incidence_matrix(graph: Graph) -> str:
    incidence = graph.incidence_matrix()
    n, m = incidence.shape
    text = _format_table(graph, f"Incidence matrix ({n} vertices x {m} edges):", incidence)
    if m == 0:
        text += "\n(no edges)"
    return text


def format_ascii(graph: Graph) -> str:
    lines = ["ASCII view:"]
    for i, vertex in enumerate(graph.vertices):
        friends = graph.neighbor_names(i)
        lines.append(f"[{i}] {vertex.name} -- " + (", ".join(friends) if friends else "(no friends)"))
    return "\n".join(lines)


def format_traversal(graph: Graph,
                     traversal: Traversal,
                     start_name: str,
                     kind: str = "BFS",
                     limit: Optional[int] = None) -> str:
    """
    Render a traversal as one " index: name" line per visited vertex
    :param limit: maximum number of listed vertices; the total is always the full count
    """
    lines = [f"{kind} visit order (from {start_name}):"]
    if traversal.count == 0:
        lines.append("(none)")
        return "\n".join(lines)
    shown = traversal.order if limit is None else traversal.order[:limit]
    lines.extend(f" {u}: {graph.vertices[u].name}" for u in shown)
    lines.append(f"Total visited: {traversal.count}")
    return "\n".join(lines)


def _escape_label(name: str) -> str:
    return name.replace("\\", "\\\\").replace('"', '\\"')


def _graph_id(graph_name: str) -> str:
    if DOT_ID.fullmatch(graph_name) and graph_name.lower() not in DOT_KEYWORDS:
        return graph_name
    return f'"{_escape_label(graph_name)}"'


def to_dot(graph: Graph, graph_name: str = DEFAULT_GRAPH_NAME) -> str:
    """Graphviz description of the graph.

    Nodes are declared in index order, then each edge once as u -- v with
    u < v, sorted by u then v, so equal graphs give byte-identical output.
    """
    lines = [f"graph {_graph_id(graph_name)} {{"]
    lines.extend(f'  v{i} [label="{_escape_label(vertex.name)}"];' for i, vertex in enumerate(graph.vertices))
    lines.extend(f"  v{u} -- v{v};" for u, v in graph.edges())
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(graph: Graph, path: str, graph_name: str = DEFAULT_GRAPH_NAME) -> str:
    text = to_dot(graph, graph_name)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    logger.info(f"Wrote {path}. Render it with: dot -Tpng {path} -o graph.png")
    return path
