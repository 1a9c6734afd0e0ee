"""Ready-made traversal hooks and materialised traversal results.

The traversal engine only reports events. The recorders in this module turn
those events into the result values callers usually want: visiting orders
and the spanning-forest parent list.
"""

from dataclasses import dataclass, field
from enum import Enum

import structlog

from graphwalk.algorithms.traversal import NO_PARENT, breadth_first, depth_first
from graphwalk.graph.adjacency import Graph

logger = structlog.get_logger(__name__)


class Strategy(str, Enum):
    """Traversal strategy selector."""

    DFS = "dfs"
    BFS = "bfs"


@dataclass
class OrderRecorder:
    """Vertex hook that records the order in which it is called.

    Example:
        >>> recorder = OrderRecorder()
        >>> depth_first(graph, 1, pre_visit=recorder)
        >>> recorder.order
        [1, 2, 3, 4]
    """

    order: list[int] = field(default_factory=list)

    def __call__(self, vertex: int) -> None:
        self.order.append(vertex)


class SpanningForest:
    """Edge hook that builds the spanning-forest parent list.

    ``parents[v]`` is the vertex ``v`` was discovered from, or ``0`` for the
    roots of the forest. Slot ``0`` is unused.
    """

    def __init__(self, vertex_count: int):
        """Initialize a forest where every vertex is a root.

        Args:
            vertex_count: Number of vertices in the traversed graph
        """
        self.parents: list[int] = [NO_PARENT] * (vertex_count + 1)

    def __call__(self, child: int, parent: int) -> None:
        self.parents[child] = parent

    def roots(self) -> list[int]:
        """Return the roots of the forest in increasing order."""
        return [v for v in range(1, len(self.parents)) if self.parents[v] == NO_PARENT]

    def path_to_root(self, vertex: int) -> list[int]:
        """Return the tree path from ``vertex`` up to its root, inclusive."""
        path = [vertex]
        while self.parents[path[-1]] != NO_PARENT:
            path.append(self.parents[path[-1]])
        return path


@dataclass
class Traversal:
    """Materialised result of a full traversal.

    Attributes:
        strategy: Strategy that produced the result
        start: Vertex the traversal began at
        preorder: Vertices in discovery order
        postorder: Vertices in finishing order
        parents: Spanning-forest parent list, ``0`` for roots, slot ``0`` unused
    """

    strategy: Strategy
    start: int
    preorder: list[int] = field(default_factory=list)
    postorder: list[int] = field(default_factory=list)
    parents: list[int] = field(default_factory=list)

    def roots(self) -> list[int]:
        """Return the roots of the spanning forest, in discovery order."""
        return [v for v in self.preorder if self.parents[v] == NO_PARENT]


def walk(graph: Graph, start: int = 1, strategy: Strategy | str = Strategy.DFS) -> Traversal:
    """Traverse a graph and collect orders and the spanning forest.

    Args:
        graph: Graph to traverse
        start: First root of the traversal
        strategy: ``"dfs"`` or ``"bfs"``

    Returns:
        The collected Traversal

    Raises:
        InvalidStartVertexError: If ``start`` is out of range
        ValueError: If the strategy is unknown
    """
    strategy = Strategy(strategy)
    pre = OrderRecorder()
    post = OrderRecorder()
    forest = SpanningForest(graph.vertex_count)

    traverse = depth_first if strategy is Strategy.DFS else breadth_first
    traverse(graph, start, pre_visit=pre, post_visit=post, tree_edge=forest)

    logger.debug(
        "traversal_collected",
        strategy=strategy.value,
        start=start,
        roots=len(forest.roots()),
    )

    return Traversal(
        strategy=strategy,
        start=start,
        preorder=pre.order,
        postorder=post.order,
        parents=forest.parents,
    )
