"""Bipartiteness testing by breadth-first two-coloring.

Every traversal root gets the first color and every tree edge hands the
child the opposite color of its parent. An edge between two vertices of the
same color closes an odd cycle, which stops the walk.
"""

from enum import IntEnum

import structlog

from graphwalk.algorithms.traversal import breadth_first
from graphwalk.errors import NotBipartiteError
from graphwalk.graph.adjacency import Graph, GraphKind

logger = structlog.get_logger(__name__)


class Color(IntEnum):
    """Vertex colors of a two-coloring."""

    NONE = 0
    FIRST = 1
    SECOND = 2

    @property
    def complement(self) -> "Color":
        """The opposite color."""
        return Color.SECOND if self is Color.FIRST else Color.FIRST


class _Coloring:
    """Hook set assigning colors during a breadth-first traversal."""

    def __init__(self, vertex_count: int):
        self.colors: list[Color] = [Color.NONE] * (vertex_count + 1)

    def on_discover(self, vertex: int) -> None:
        # Roots arrive uncolored; children were colored by their tree edge
        if self.colors[vertex] is Color.NONE:
            self.colors[vertex] = Color.FIRST

    def on_tree_edge(self, child: int, parent: int) -> None:
        self.colors[child] = self.colors[parent].complement

    def on_non_tree_edge(self, vertex: int, neighbor: int) -> None:
        if self.colors[neighbor] is self.colors[vertex]:
            raise NotBipartiteError(vertex, neighbor)


def two_coloring(graph: Graph) -> list[int] | None:
    """Compute a two-coloring of the graph.

    Args:
        graph: Graph to color

    Returns:
        List where entry ``v`` is ``1`` or ``2`` for every vertex (slot ``0``
        is ``0``), or None if some edge joins two vertices of the same color.
        Colors are only meaningful within a connected component. Directed
        graphs are colored through their underlying undirected graph.
    """
    if graph.vertex_count == 0:
        return [int(Color.NONE)]

    if graph.kind is GraphKind.DIRECTED:
        # Two-coloring is defined on the underlying undirected graph
        graph = Graph.from_edges(GraphKind.UNDIRECTED, graph.vertex_count, graph.edges())

    coloring = _Coloring(graph.vertex_count)

    try:
        breadth_first(
            graph,
            1,
            pre_visit=coloring.on_discover,
            tree_edge=coloring.on_tree_edge,
            non_tree_edge=coloring.on_non_tree_edge,
        )
    except NotBipartiteError as e:
        logger.info("odd_cycle_detected", vertex=e.vertex, neighbor=e.neighbor)
        return None

    logger.debug("two_coloring_completed", vertex_count=graph.vertex_count)
    return [int(color) for color in coloring.colors]


def is_bipartite(graph: Graph) -> bool:
    """Check whether the graph admits a two-coloring."""
    return two_coloring(graph) is not None


def partition(colors: list[int]) -> tuple[list[int], list[int]]:
    """Split a two-coloring into the two vertex sides.

    Args:
        colors: Output of ``two_coloring``

    Returns:
        Vertices colored ``1`` and vertices colored ``2``, each in increasing order
    """
    first = [v for v in range(1, len(colors)) if colors[v] == Color.FIRST]
    second = [v for v in range(1, len(colors)) if colors[v] == Color.SECOND]
    return first, second
