"""Iterative depth-first and breadth-first traversal with visitor hooks.

Both traversals visit every vertex of the graph exactly once. When the
stack or queue runs dry before all vertices are done, the walk restarts at
the lowest-numbered vertex not yet visited, so disconnected graphs are
covered completely.

Hooks are plain callables passed by keyword; any hook left out is a no-op.
A hook may raise to abort the traversal, the exception reaches the caller
unchanged.

Example:
    >>> graph = Graph.from_edges(GraphKind.UNDIRECTED, 3, [(1, 2), (2, 3)])
    >>> order = []
    >>> depth_first(graph, 1, pre_visit=order.append)
    >>> order
    [1, 2, 3]
"""

from collections import deque
from collections.abc import Callable, Iterator
from enum import IntEnum

import structlog

from graphwalk.errors import InvalidStartVertexError
from graphwalk.graph.adjacency import Graph

logger = structlog.get_logger(__name__)

VertexHook = Callable[[int], None]
EdgeHook = Callable[[int, int], None]

NO_PARENT = 0


class VertexState(IntEnum):
    """Per-vertex visitation tag, private to a single traversal call.

    Attributes:
        UNVISITED: Not discovered yet
        OPEN: Discovered, still on the active path (DFS) or queued (BFS)
        FINISHED: Fully processed
    """

    UNVISITED = 0
    OPEN = 1
    FINISHED = 2


def _noop(*_args: int) -> None:
    return None


def new_state(vertex_count: int) -> list[VertexState]:
    """Allocate a state table for ``vertex_count`` vertices (slot 0 unused)."""
    return [VertexState.UNVISITED] * (vertex_count + 1)


def check_start(graph: Graph, start: int) -> None:
    """Validate a traversal start vertex.

    Raises:
        InvalidStartVertexError: If ``start`` is not an integer in ``[1, N]``
    """
    if (
        not isinstance(start, int)
        or isinstance(start, bool)
        or not 1 <= start <= graph.vertex_count
    ):
        logger.debug("invalid_start_vertex", start=start, vertex_count=graph.vertex_count)
        raise InvalidStartVertexError(start, graph.vertex_count)


def roots(start: int, state: list[VertexState]) -> Iterator[int]:
    """Yield ``start``, then each vertex still unvisited when it is reached.

    The scan cursor only moves forward and reads the state table lazily, so
    vertices visited by earlier walks are skipped without rescanning.
    """
    yield start
    for vertex in range(1, len(state)):
        if state[vertex] is VertexState.UNVISITED:
            yield vertex


def explore_depth_first(
    graph: Graph,
    root: int,
    state: list[VertexState],
    *,
    pre_visit: VertexHook = _noop,
    post_visit: VertexHook = _noop,
    tree_edge: EdgeHook = _noop,
    back_edge: EdgeHook = _noop,
) -> int:
    """Run one depth-first tree walk from ``root`` over unvisited vertices.

    Vertices already open or finished in ``state`` are never re-entered,
    which lets callers chain several walks over a shared state table.

    Args:
        graph: Graph to walk
        root: Unvisited vertex to start from
        state: Shared state table, updated in place
        pre_visit: Called when a vertex is discovered
        post_visit: Called when a vertex is finished
        tree_edge: Called as ``tree_edge(child, parent)`` just before ``pre_visit(child)``
        back_edge: Called as ``back_edge(vertex, ancestor)`` for each entry
            from a newly discovered vertex to a still open vertex

    Returns:
        Number of vertices finished by this walk
    """
    finished = 0
    stack: list[tuple[int, int]] = [(root, NO_PARENT)]

    while stack:
        vertex, parent = stack[-1]
        current = state[vertex]

        if current is VertexState.UNVISITED:
            state[vertex] = VertexState.OPEN
            if parent != NO_PARENT:
                tree_edge(vertex, parent)
            pre_visit(vertex)
            for neighbor in graph.neighbors(vertex):
                seen = state[neighbor]
                if seen is VertexState.UNVISITED:
                    stack.append((neighbor, vertex))
                elif seen is VertexState.OPEN:
                    back_edge(vertex, neighbor)
        else:
            stack.pop()
            # Entries for already finished vertices are stale duplicates
            if current is VertexState.OPEN:
                state[vertex] = VertexState.FINISHED
                post_visit(vertex)
                finished += 1

    return finished


def depth_first(
    graph: Graph,
    start: int,
    *,
    pre_visit: VertexHook = _noop,
    post_visit: VertexHook = _noop,
    tree_edge: EdgeHook = _noop,
    back_edge: EdgeHook = _noop,
) -> None:
    """Depth-first traversal of every vertex, beginning at ``start``.

    Uses an explicit stack of ``(vertex, parent)`` entries. The top entry is
    inspected, not popped: an unvisited vertex is opened and its unvisited
    neighbors pushed in adjacency order; an open vertex is popped and
    finished. Unreachable components are picked up by restarting at the
    lowest-numbered unvisited vertex.

    Args:
        graph: Graph to traverse
        start: First root, in ``[1, vertex_count]``
        pre_visit: Called once per vertex on discovery
        post_visit: Called once per vertex when finished
        tree_edge: Called once per non-root vertex as ``tree_edge(child, parent)``
        back_edge: Called for adjacency entries pointing to open vertices

    Raises:
        InvalidStartVertexError: If ``start`` is out of range; no hook fires
    """
    check_start(graph, start)

    vertex_count = graph.vertex_count
    state = new_state(vertex_count)
    processed = 0

    logger.debug("traversal_started", strategy="dfs", start=start, vertex_count=vertex_count)

    for root in roots(start, state):
        processed += explore_depth_first(
            graph,
            root,
            state,
            pre_visit=pre_visit,
            post_visit=post_visit,
            tree_edge=tree_edge,
            back_edge=back_edge,
        )
        if processed == vertex_count:
            break

    logger.debug("traversal_completed", strategy="dfs", processed=processed)


def breadth_first(
    graph: Graph,
    start: int,
    *,
    pre_visit: VertexHook = _noop,
    post_visit: VertexHook = _noop,
    tree_edge: EdgeHook = _noop,
    non_tree_edge: EdgeHook = _noop,
) -> None:
    """Breadth-first traversal of every vertex, beginning at ``start``.

    The head of the queue has all its neighbors scanned before it is
    dequeued and finished. Unseen neighbors are marked seen as they are
    enqueued, so each vertex enters the queue once. Unreachable components
    are picked up by restarting at the lowest-numbered unseen vertex.

    Args:
        graph: Graph to traverse
        start: First root, in ``[1, vertex_count]``
        pre_visit: Called once per vertex when it is marked seen
        post_visit: Called once per vertex after its neighbors are scanned
        tree_edge: Called once per non-root vertex as ``tree_edge(child, parent)``
        non_tree_edge: Called as ``non_tree_edge(vertex, neighbor)`` for
            adjacency entries pointing to already seen vertices

    Raises:
        InvalidStartVertexError: If ``start`` is out of range; no hook fires
    """
    check_start(graph, start)

    vertex_count = graph.vertex_count
    state = new_state(vertex_count)
    processed = 0
    queue: deque[int] = deque()

    logger.debug("traversal_started", strategy="bfs", start=start, vertex_count=vertex_count)

    for root in roots(start, state):
        state[root] = VertexState.OPEN
        pre_visit(root)
        queue.append(root)

        while queue:
            vertex = queue[0]
            for neighbor in graph.neighbors(vertex):
                if state[neighbor] is VertexState.UNVISITED:
                    state[neighbor] = VertexState.OPEN
                    tree_edge(neighbor, vertex)
                    pre_visit(neighbor)
                    queue.append(neighbor)
                else:
                    non_tree_edge(vertex, neighbor)
            queue.popleft()
            state[vertex] = VertexState.FINISHED
            post_visit(vertex)
            processed += 1

        if processed == vertex_count:
            break

    logger.debug("traversal_completed", strategy="bfs", processed=processed)
