"""Exception types raised by the graph engine.

Construction problems and invalid traversal arguments propagate to the
caller. Cycle and odd-cycle conditions are raised from traversal hooks to
abort a walk early; the public algorithms catch them and report an absent
result instead.
"""


class GraphError(Exception):
    """Base class for all graph engine errors."""

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the error
        """
        super().__init__(message)
        self.message = message


class MalformedGraphError(GraphError, ValueError):
    """Exception raised when graph input violates structural constraints.

    Covers bad file headers, short or non-integer edge lists, and vertex ids
    outside ``[1, vertex_count]``.
    """


class InvalidStartVertexError(GraphError, ValueError):
    """Exception raised when a traversal starts outside ``[1, vertex_count]``."""

    def __init__(self, vertex: object, vertex_count: int):
        super().__init__(
            f"Start vertex {vertex!r} is outside the valid range [1, {vertex_count}]",
        )
        self.vertex = vertex
        self.vertex_count = vertex_count


class CycleDetectedError(GraphError):
    """Exception raised when a back edge closes a directed cycle.

    Attributes:
        vertex: Vertex whose adjacency entry closes the cycle
        ancestor: Open vertex on the active path that the entry points to
    """

    def __init__(self, vertex: int, ancestor: int):
        super().__init__(f"Cycle detected: edge {vertex} -> {ancestor} points to an ancestor")
        self.vertex = vertex
        self.ancestor = ancestor


class NotBipartiteError(GraphError):
    """Exception raised when an edge joins two vertices of the same color.

    Attributes:
        vertex: Vertex being scanned
        neighbor: Already colored neighbor sharing the vertex's color
    """

    def __init__(self, vertex: int, neighbor: int):
        super().__init__(f"Graph is not bipartite: edge {vertex} -> {neighbor} joins equal colors")
        self.vertex = vertex
        self.neighbor = neighbor
