"""Graph error classes.

Every failure of a graph operation is one of these. Validation happens before
any mutation, so a raised error always leaves the graph untouched.
"""


class GraphError(Exception):
    """Base exception for friendship graph errors."""

    pass


class CapacityExceededError(GraphError):
    """Raised when inserting a vertex into a full graph."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Vertex limit reached ({capacity})")


class DuplicateNameError(GraphError):
    """Raised when a vertex with the same name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A person named {name!r} already exists")


class InvalidNameError(GraphError):
    """Raised when a vertex name is empty or not a string."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid name: {name!r}")


class VertexNotFoundError(GraphError):
    """Raised when no vertex carries the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Person {name!r} not found")


class InvalidIndexError(GraphError):
    """Raised when a vertex index falls outside [0, n)."""

    def __init__(self, index: int, n: int):
        self.index = index
        self.n = n
        super().__init__(f"Vertex index {index} should be in the range [0, {n - 1}]")


class SelfLoopError(GraphError):
    """Raised when connecting a vertex to itself."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Vertex {index} cannot be friends with itself")


class EdgeExistsError(GraphError):
    """Raised when inserting an edge that is already present."""

    def __init__(self, u: int, v: int):
        self.u = u
        self.v = v
        super().__init__(f"Edge ({u}, {v}) already exists")


class EdgeNotFoundError(GraphError):
    """Raised when removing an edge that is not present."""

    def __init__(self, u: int, v: int):
        self.u = u
        self.v = v
        super().__init__(f"Edge ({u}, {v}) does not exist")
