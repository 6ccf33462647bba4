from typing import Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from friend_graph.graph import Graph


def plot_network(graph: Graph, *paths: Sequence[int], draw_all_edges=True, seed: int = 0,
                 save_to_path=None) -> Tuple[any, any]:
    """Plots the friendship network, highlighting visit orders if given.

    Args:
        graph: the friendship graph.
        paths: visit orders (lists of vertex indices), e.g. Traversal.order.
        draw_all_edges: draw every friendship, not only the path edges.
        seed: seed of the spring layout, for a reproducible picture.
        save_to_path: if set, the figure is also written to this file.

    Returns:
        (fig, ax) from plt.subplots
    """
    G = graph.to_networkx()
    fig, ax = plt.subplots()

    pos = nx.spring_layout(G, seed=seed) if G.number_of_nodes() > 0 else {}
    labels = nx.get_node_attributes(G, "name")

    if not paths:
        _ = nx.draw_networkx_nodes(G, pos, node_size=600, ax=ax)
    else:
        _ = nx.draw_networkx_nodes(G, pos, node_size=600, node_color="#808080", ax=ax)
        all_nodes = set()
        for path in paths:
            all_nodes.update(path)
        _ = nx.draw_networkx_nodes(G.subgraph(list(all_nodes)), pos, node_size=600, ax=ax)

    _ = nx.draw_networkx_labels(G, pos, labels=labels, font_size=10, font_color="white", ax=ax)

    if not paths:
        _ = nx.draw_networkx_edges(G, pos, edgelist=list(G.edges), width=1, ax=ax)
    else:
        if draw_all_edges:
            _ = nx.draw_networkx_edges(G, pos, edgelist=list(G.edges), width=0.3, ax=ax)
        color_list = ['black', 'red']
        for path_idx, path in enumerate(paths):
            # consecutive visits are not always friends (e.g. BFS), keep real edges only
            edgelist = [(u, v) for u, v in zip(path[:-1], path[1:]) if G.has_edge(u, v)]
            _ = nx.draw_networkx_edges(G, pos, edgelist=edgelist, width=2,
                                       edge_color=color_list[path_idx % len(color_list)], ax=ax)

    ax.set_axis_off()
    if save_to_path is not None:
        fig.savefig(save_to_path, facecolor='white', transparent=False)

    return fig, ax
