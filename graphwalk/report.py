"""Text reports for algorithm results.

Each ``report_*`` function runs one algorithm and returns the lines to
print. Full listings (orders, components, colors) are included only when
the graph has at most ``listing_limit`` vertices.
"""

from collections.abc import Iterable
from enum import Enum

import structlog

from graphwalk.algorithms.bipartite import two_coloring
from graphwalk.algorithms.components import strongly_connected_components
from graphwalk.algorithms.toposort import topological_sort
from graphwalk.algorithms.visitors import Strategy, walk
from graphwalk.config import DEFAULT_LISTING_LIMIT
from graphwalk.graph.adjacency import Graph

logger = structlog.get_logger(__name__)


class Mode(str, Enum):
    """Report selectors accepted on the command line."""

    DFS = "dfs"
    BFS = "bfs"
    SORT = "sort"
    CONNECTED = "connected"
    BIPARTITE = "bipartite"


def _join(values: Iterable[int]) -> str:
    return " ".join(str(v) for v in values)


def report_dfs(graph: Graph, start: int = 1, show_forest: bool = True) -> list[str]:
    """Preorder of a depth-first traversal, then the spanning forest."""
    traversal = walk(graph, start, Strategy.DFS)
    lines = ["** dfs:", _join(traversal.preorder)]
    if show_forest:
        lines.append(_join(traversal.parents[1:]))
    return lines


def report_bfs(graph: Graph, start: int = 1, show_forest: bool = True) -> list[str]:
    """Visiting order of a breadth-first traversal, then the spanning forest."""
    traversal = walk(graph, start, Strategy.BFS)
    lines = ["** bfs:", _join(traversal.postorder)]
    if show_forest:
        lines.append(_join(traversal.parents[1:]))
    return lines


def report_sort(graph: Graph, listing_limit: int = DEFAULT_LISTING_LIMIT) -> list[str]:
    """Acyclicity verdict and, for small graphs, the topological order."""
    lines = ["** topological sort:"]
    order = topological_sort(graph)
    if order is None:
        lines.append("graph contains a cycle")
        return lines

    lines.append("graph is acyclic")
    if graph.vertex_count <= listing_limit:
        lines.append(_join(order))
    return lines


def report_connected(graph: Graph, listing_limit: int = DEFAULT_LISTING_LIMIT) -> list[str]:
    """Component count and sizes and, for small graphs, the members."""
    components = strongly_connected_components(graph)
    lines = [
        "** strongly connected components:",
        f"#components: {len(components)}",
        f"#vertices in components: {_join(len(c) for c in components)}",
    ]
    if graph.vertex_count <= listing_limit:
        lines.extend("{" + ", ".join(str(v) for v in c) + "}" for c in components)
    return lines


def report_bipartite(graph: Graph, listing_limit: int = DEFAULT_LISTING_LIMIT) -> list[str]:
    """Bipartiteness verdict and, for small graphs, the vertex colors."""
    lines = ["** is the graph bipartite?:"]
    colors = two_coloring(graph)
    if colors is None:
        lines.append("graph is not bipartite")
        return lines

    lines.append("graph is bipartite")
    if graph.vertex_count <= listing_limit:
        lines.append(_join(colors[1:]))
    return lines


def build_report(
    graph: Graph,
    mode: Mode | str,
    *,
    start: int = 1,
    listing_limit: int = DEFAULT_LISTING_LIMIT,
    show_forest: bool = True,
) -> list[str]:
    """Run the algorithm selected by ``mode`` and format its result.

    Args:
        graph: Graph to analyse
        mode: One of ``dfs``, ``bfs``, ``sort``, ``connected``, ``bipartite``
        start: Start vertex for ``dfs`` and ``bfs``
        listing_limit: Largest vertex count with full listings
        show_forest: Include the spanning forest for ``dfs`` and ``bfs``

    Returns:
        Report lines without trailing newlines

    Raises:
        ValueError: If the mode is unknown
        InvalidStartVertexError: If ``start`` is out of range for a traversal
    """
    mode = Mode(mode)
    logger.info("building_report", mode=mode.value, vertex_count=graph.vertex_count)

    if mode is Mode.DFS:
        return report_dfs(graph, start, show_forest)
    if mode is Mode.BFS:
        return report_bfs(graph, start, show_forest)
    if mode is Mode.SORT:
        return report_sort(graph, listing_limit)
    if mode is Mode.CONNECTED:
        return report_connected(graph, listing_limit)
    return report_bipartite(graph, listing_limit)
