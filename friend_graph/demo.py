import logging

from friend_graph.interaction import DEFAULT_PARAMS, make_session, run_commands

params = {
    **DEFAULT_PARAMS,
    'dot_path': 'friends.dot',
    'log_level': 'WARNING',
}

COMMANDS = [
    ('load-sample',),
    ('list-vertices',),
    ('matrix',),
    ('incidence',),
    ('ascii',),
    ('bfs', 'Alice'),
    ('dfs', 'Alice'),
    ('export-dot',),
]


def main():
    logging.basicConfig(level=params['log_level'], format="%(asctime)s - %(levelname)s - %(message)s")
    session = make_session(params)
    return run_commands(session, COMMANDS)


if __name__ == '__main__':
    main()
