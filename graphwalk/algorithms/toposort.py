"""Topological sorting by reverse depth-first postorder.

A vertex finishes only after everything reachable from it has finished, so
reversing the finishing order puts every edge source before its target. A
back edge to a vertex still on the active path means the graph has a cycle
and no such order exists.
"""

import structlog

from graphwalk.algorithms.traversal import depth_first
from graphwalk.errors import CycleDetectedError
from graphwalk.graph.adjacency import Graph

logger = structlog.get_logger(__name__)


def _reject_back_edge(vertex: int, ancestor: int) -> None:
    raise CycleDetectedError(vertex, ancestor)


def topological_sort(graph: Graph, start: int = 1) -> list[int] | None:
    """Compute a topological order of all vertices.

    Args:
        graph: Graph to sort, normally directed
        start: Vertex the depth-first pass begins at

    Returns:
        All vertices ordered so that every edge points forward, or None if the
        graph contains a cycle. An empty graph gives an empty list.

    Raises:
        InvalidStartVertexError: If ``start`` is out of range in a non-empty graph

    Note:
        In an undirected graph every stored edge appears in both directions,
        so any edge at all counts as a cycle.
    """
    if graph.vertex_count == 0:
        return []

    postorder: list[int] = []

    try:
        depth_first(graph, start, post_visit=postorder.append, back_edge=_reject_back_edge)
    except CycleDetectedError as e:
        logger.info("cycle_detected", vertex=e.vertex, ancestor=e.ancestor)
        return None

    postorder.reverse()
    logger.debug("topological_sort_completed", vertex_count=len(postorder))
    return postorder


def is_acyclic(graph: Graph) -> bool:
    """Check whether the graph has a topological order."""
    return topological_sort(graph) is not None
