"""Strongly connected components with Kosaraju's two-pass algorithm.

The first pass is a full depth-first traversal of the transpose graph that
records finishing order. The second pass walks the original graph, taking
roots in reverse finishing order; each walk is confined to vertices not yet
assigned, and everything it reaches forms one component.
"""

import structlog

from graphwalk.algorithms.traversal import (
    VertexState,
    depth_first,
    explore_depth_first,
    new_state,
)
from graphwalk.graph.adjacency import Graph

logger = structlog.get_logger(__name__)


def finishing_order(graph: Graph, start: int = 1) -> list[int]:
    """Return the vertices of ``graph`` in depth-first finishing order."""
    order: list[int] = []
    depth_first(graph, start, post_visit=order.append)
    return order


def strongly_connected_components(graph: Graph) -> list[list[int]]:
    """Partition the vertices into strongly connected components.

    Args:
        graph: Graph to decompose

    Returns:
        Components in the order the second pass discovers them, each listing
        its vertices in discovery order. Every vertex appears in exactly one
        component; isolated vertices form singleton components.

    Example:
        >>> graph = Graph.from_edges(GraphKind.DIRECTED, 4, [(1, 2), (2, 1), (3, 4)])
        >>> strongly_connected_components(graph)
        [[4], [3], [1, 2]]
    """
    if graph.vertex_count == 0:
        return []

    priority = finishing_order(graph.transpose())

    state = new_state(graph.vertex_count)
    components: list[list[int]] = []

    while priority:
        root = priority.pop()
        if state[root] is not VertexState.UNVISITED:
            continue
        component: list[int] = []
        explore_depth_first(graph, root, state, pre_visit=component.append)
        components.append(component)

    logger.debug(
        "components_computed",
        vertex_count=graph.vertex_count,
        component_count=len(components),
    )
    return components


def component_index(components: list[list[int]], vertex_count: int) -> list[int]:
    """Map each vertex to the position of its component.

    Args:
        components: Output of ``strongly_connected_components``
        vertex_count: Number of vertices in the decomposed graph

    Returns:
        List where entry ``v`` is the index of the component holding ``v``;
        slot ``0`` is ``-1``
    """
    index = [-1] * (vertex_count + 1)
    for position, component in enumerate(components):
        for vertex in component:
            index[vertex] = position
    return index
