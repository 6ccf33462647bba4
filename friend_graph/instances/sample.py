import logging

from friend_graph.errors import CapacityExceededError, DuplicateNameError, EdgeExistsError
from friend_graph.graph import Graph

SAMPLE_NAMES = ["Alice", "Bob", "Carol", "Dave", "Eve", "Frank"]
SAMPLE_EDGES = [
    ("Alice", "Bob"),
    ("Alice", "Carol"),
    ("Bob", "Dave"),
    ("Carol", "Eve"),
    ("Eve", "Frank"),
    ("Bob", "Carol"),
    ("Dave", "Frank"),
]

logger = logging.getLogger(__name__)


def load_sample(graph: Graph) -> Graph:
    """Add the demonstration network (6 people, 7 friendships) to `graph`.

    People and friendships already present are skipped, so loading twice is
    harmless. If the missing people do not fit, CapacityExceededError is
    raised before anything is added.
    """
    missing = [name for name in SAMPLE_NAMES if name not in graph]
    if graph.n + len(missing) > graph.capacity:
        raise CapacityExceededError(graph.capacity)

    for name in SAMPLE_NAMES:
        try:
            graph.insert_vertex(name)
        except DuplicateNameError:
            logger.warning(f"Sample person {name!r} already present, skipping")
    for name1, name2 in SAMPLE_EDGES:
        try:
            graph.insert_edge_by_name(name1, name2)
        except EdgeExistsError:
            logger.warning(f"Sample friendship {name1!r} - {name2!r} already present, skipping")
    logger.info(f"Sample graph loaded ({graph.n} vertices)")
    return graph
