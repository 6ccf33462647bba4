import dataclasses
import logging
import sys
from typing import Iterable, List, Optional, Sequence

from friend_graph import display
from friend_graph.errors import GraphError
from friend_graph.graph import Graph, MAX_VERTICES
from friend_graph.instances.sample import load_sample
from friend_graph.traversal import Traversal, bfs, dfs

logger = logging.getLogger(__name__)

DEFAULT_PARAMS = {
    'capacity': MAX_VERTICES,
    'dot_path': 'friends.dot',
    'graph_name': display.DEFAULT_GRAPH_NAME,
    'traversal_limit': None,
    'log_level': 'INFO',
}


@dataclasses.dataclass
class Session:
    """Owns one friendship graph and exposes the user-level commands on it.

    People are addressed by name; indices only show up in the rendered views.
    """
    graph: Graph = None
    capacity: int = MAX_VERTICES
    dot_path: str = DEFAULT_PARAMS['dot_path']
    graph_name: str = DEFAULT_PARAMS['graph_name']
    traversal_limit: Optional[int] = None

    def __post_init__(self):
        if self.graph is None:
            self.graph = Graph(self.capacity)
        self.capacity = self.graph.capacity

    def insert_vertex(self, name: str) -> int:
        index = self.graph.insert_vertex(name)
        logger.info(f"Person {name!r} added (index {index})")
        return index

    def insert_edge(self, name1: str, name2: str):
        self.graph.insert_edge_by_name(name1, name2)
        logger.info(f"Friendship between {name1!r} and {name2!r} added")

    def remove_vertex(self, name: str):
        self.graph.remove_vertex_by_name(name)
        logger.info(f"Person {name!r} removed")

    def remove_edge(self, name1: str, name2: str):
        self.graph.remove_edge_by_name(name1, name2)
        logger.info(f"Friendship between {name1!r} and {name2!r} removed")

    def list_vertices(self) -> str:
        return display.format_adjacency_list(self.graph)

    def matrix(self) -> str:
        return display.format_adjacency_matrix(self.graph)

    def incidence(self) -> str:
        return display.format_incidence_matrix(self.graph)

    def ascii(self) -> str:
        return display.format_ascii(self.graph)

    def traverse(self, name: str, kind: str = "bfs") -> Traversal:
        kind = kind.lower()
        assert kind in {'bfs', 'dfs'}, f"kind must be one of {{'bfs', 'dfs'}}, got {kind!r}"
        start = self.graph.index_of(name)
        return bfs(self.graph, start) if kind == 'bfs' else dfs(self.graph, start)

    def visit_names(self, traversal: Traversal) -> List[str]:
        return [self.graph.vertices[u].name for u in traversal.order]

    def bfs(self, name: str) -> List[str]:
        return self.visit_names(self.traverse(name, 'bfs'))

    def dfs(self, name: str) -> List[str]:
        return self.visit_names(self.traverse(name, 'dfs'))

    def load_sample(self) -> int:
        load_sample(self.graph)
        return self.graph.n

    def export_dot(self, path: Optional[str] = None) -> str:
        return display.write_dot(self.graph, path or self.dot_path, self.graph_name)


def make_session(params: Optional[dict] = None) -> Session:
    params = params or {}
    logging.getLogger('friend_graph').setLevel(params.get('log_level', DEFAULT_PARAMS['log_level']))
    return Session(
        capacity=params.get('capacity', DEFAULT_PARAMS['capacity']),
        dot_path=params.get('dot_path', DEFAULT_PARAMS['dot_path']),
        graph_name=params.get('graph_name', DEFAULT_PARAMS['graph_name']),
        traversal_limit=params.get('traversal_limit', DEFAULT_PARAMS['traversal_limit']),
    )


def _report(session: Session, command: str, args: Sequence[str], result) -> str:
    if command in ('bfs', 'dfs'):
        return display.format_traversal(session.graph, result, args[0], command.upper(),
                                        limit=session.traversal_limit)
    if command == 'export-dot':
        return f"File '{result}' written. Render it with: dot -Tpng {result} -o graph.png"
    if isinstance(result, str):
        return result
    if command == 'insert-vertex':
        return f"Person '{args[0]}' added (index {result})."
    if command == 'remove-vertex':
        return f"Person '{args[0]}' removed."
    if command == 'insert-edge':
        return f"Friendship between '{args[0]}' and '{args[1]}' added."
    if command == 'remove-edge':
        return f"Friendship between '{args[0]}' and '{args[1]}' removed."
    if command == 'load-sample':
        return f"Sample graph loaded ({result} vertices)."
    return str(result)


COMMANDS = {
    'insert-vertex': Session.insert_vertex,
    'insert-edge': Session.insert_edge,
    'remove-vertex': Session.remove_vertex,
    'remove-edge': Session.remove_edge,
    'list-vertices': Session.list_vertices,
    'matrix': Session.matrix,
    'incidence': Session.incidence,
    'ascii': Session.ascii,
    'bfs': Session.bfs,
    'dfs': Session.dfs,
    'load-sample': Session.load_sample,
    'export-dot': Session.export_dot,
}


def run_commands(session: Session,
                 commands: Iterable[Sequence[str]],
                 print_to_file=sys.stdout) -> int:
    """
    Execute (command, *args) tuples against the session, printing each outcome
    :param commands: e.g. [("insert-vertex", "Alice"), ("bfs", "Alice")]
    :return: number of commands that failed with a GraphError
    """
    n_errors = 0
    for command, *args in commands:
        if command not in COMMANDS:
            raise ValueError(f"Unknown command {command!r}. It must be one of {list(COMMANDS)}")
        try:
            if command in ('bfs', 'dfs'):
                # keep the indices for the report
                result = session.traverse(args[0], command)
            else:
                result = COMMANDS[command](session, *args)
        except GraphError as e:
            n_errors += 1
            logger.warning(f"{command} {args} failed: {e}")
            print(f"Error: {e}.", file=print_to_file)
            continue
        print(_report(session, command, args, result), file=print_to_file)
    return n_errors
