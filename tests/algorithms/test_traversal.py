"""Unit tests for the iterative traversal engine.

Tests cover:
- Depth-first and breadth-first visiting orders
- Exactly-once pre/post visit and tree-edge events
- Restarting at the lowest unvisited vertex in disconnected graphs
- Back-edge and non-tree-edge reporting
- Start vertex validation
- Aborting a traversal from a hook
- Deep graphs without recursion limits
"""

import pytest

from graphwalk.algorithms.traversal import (
    VertexState,
    breadth_first,
    depth_first,
    explore_depth_first,
    new_state,
)
from graphwalk.errors import InvalidStartVertexError
from graphwalk.graph.adjacency import Graph, GraphKind

# Test constants
DEEP_CHAIN_LENGTH = 50_000


def path_graph():
    """Undirected path 1 - 2 - 3 - 4."""
    return Graph.from_edges(GraphKind.UNDIRECTED, 4, [(1, 2), (2, 3), (3, 4)])


def diamond_graph():
    """Directed diamond 1 -> {2, 3} -> 4."""
    return Graph.from_edges(GraphKind.DIRECTED, 4, [(1, 2), (1, 3), (2, 4), (3, 4)])


def split_graph():
    """Undirected graph with components {1, 2}, {3} and {4, 5}."""
    return Graph.from_edges(GraphKind.UNDIRECTED, 5, [(1, 2), (4, 5)])


class Events:
    """Records every hook call in order."""

    def __init__(self):
        self.pre: list[int] = []
        self.post: list[int] = []
        self.tree: list[tuple[int, int]] = []
        self.other: list[tuple[int, int]] = []
        self.log: list[tuple] = []

    def pre_visit(self, vertex):
        self.pre.append(vertex)
        self.log.append(("pre", vertex))

    def post_visit(self, vertex):
        self.post.append(vertex)
        self.log.append(("post", vertex))

    def tree_edge(self, child, parent):
        self.tree.append((child, parent))
        self.log.append(("tree", child, parent))

    def other_edge(self, vertex, neighbor):
        self.other.append((vertex, neighbor))


def run_dfs(graph, start):
    events = Events()
    depth_first(
        graph,
        start,
        pre_visit=events.pre_visit,
        post_visit=events.post_visit,
        tree_edge=events.tree_edge,
        back_edge=events.other_edge,
    )
    return events


def run_bfs(graph, start):
    events = Events()
    breadth_first(
        graph,
        start,
        pre_visit=events.pre_visit,
        post_visit=events.post_visit,
        tree_edge=events.tree_edge,
        non_tree_edge=events.other_edge,
    )
    return events


class TestDepthFirst:
    """Test depth-first traversal."""

    def test_path_preorder(self):
        """Test the preorder of an undirected path from vertex 1."""
        events = run_dfs(path_graph(), 1)

        assert events.pre == [1, 2, 3, 4]
        assert events.post == [4, 3, 2, 1]
        assert events.tree == [(2, 1), (3, 2), (4, 3)]

    def test_last_pushed_neighbor_is_explored_first(self):
        """Test that the stack explores the last adjacency entry first."""
        events = run_dfs(diamond_graph(), 1)

        assert events.pre == [1, 3, 4, 2]
        assert events.post == [4, 3, 2, 1]
        assert events.tree == [(3, 1), (4, 3), (2, 1)]

    def test_tree_edge_precedes_pre_visit(self):
        """Test that a child's tree edge is reported right before its discovery."""
        events = run_dfs(path_graph(), 1)

        assert events.log[:3] == [("pre", 1), ("tree", 2, 1), ("pre", 2)]

    def test_duplicate_stack_entries_fire_once(self):
        """Test that a vertex pushed twice is discovered and finished once."""
        graph = Graph.from_edges(GraphKind.DIRECTED, 3, [(1, 2), (1, 3), (3, 2)])

        events = run_dfs(graph, 1)

        assert events.pre == [1, 3, 2]
        assert events.post == [2, 3, 1]
        assert events.tree == [(3, 1), (2, 3)]

    def test_restarts_at_lowest_unvisited(self):
        """Test that unreachable components are visited in increasing id order."""
        events = run_dfs(split_graph(), 4)

        assert events.pre == [4, 5, 1, 2, 3]
        assert events.post == [5, 4, 2, 1, 3]
        assert events.tree == [(5, 4), (2, 1)]

    def test_back_edges_reported(self):
        """Test back-edge reporting on a directed cycle."""
        graph = Graph.from_edges(GraphKind.DIRECTED, 3, [(1, 2), (2, 3), (3, 1)])

        events = run_dfs(graph, 1)

        assert events.other == [(3, 1)]

    def test_self_loop_is_back_edge(self):
        """Test that a self loop is reported as a back edge."""
        graph = Graph.from_edges(GraphKind.DIRECTED, 1, [(1, 1)])

        events = run_dfs(graph, 1)

        assert events.other == [(1, 1)]

    def test_dag_has_no_back_edges(self):
        """Test that finished vertices are not reported as back edges."""
        events = run_dfs(diamond_graph(), 1)

        assert events.other == []

    def test_hooks_are_optional(self):
        """Test that traversal works without any hook."""
        depth_first(path_graph(), 2)

    def test_deep_chain_without_recursion(self):
        """Test a chain far deeper than the interpreter recursion limit."""
        edges = [(i, i + 1) for i in range(1, DEEP_CHAIN_LENGTH)]
        graph = Graph.from_edges(GraphKind.DIRECTED, DEEP_CHAIN_LENGTH, edges)
        post: list[int] = []

        depth_first(graph, 1, post_visit=post.append)

        assert len(post) == DEEP_CHAIN_LENGTH
        assert post[0] == DEEP_CHAIN_LENGTH
        assert post[-1] == 1


class TestBreadthFirst:
    """Test breadth-first traversal."""

    def test_diamond_order(self):
        """Test level order on a directed diamond."""
        events = run_bfs(diamond_graph(), 1)

        assert events.pre == [1, 2, 3, 4]
        assert events.post == [1, 2, 3, 4]
        assert events.tree == [(2, 1), (3, 1), (4, 2)]
        assert events.other == [(3, 4)]

    def test_undirected_non_tree_edges(self):
        """Test that the reverse of each tree edge is seen as a non-tree edge."""
        events = run_bfs(path_graph(), 1)

        assert events.tree == [(2, 1), (3, 2), (4, 3)]
        assert events.other == [(2, 1), (3, 2), (4, 3)]

    def test_tree_edge_precedes_pre_visit(self):
        """Test that a child's tree edge is reported right before it is marked seen."""
        events = run_bfs(path_graph(), 1)

        assert events.log[:4] == [("pre", 1), ("tree", 2, 1), ("pre", 2), ("post", 1)]

    def test_restarts_at_lowest_unvisited(self):
        """Test that unreachable components are visited in increasing id order."""
        events = run_bfs(split_graph(), 4)

        assert events.pre == [4, 5, 1, 2, 3]
        assert events.post == [4, 5, 1, 2, 3]
        assert events.tree == [(5, 4), (2, 1)]

    def test_deep_chain(self):
        """Test a long chain."""
        edges = [(i, i + 1) for i in range(1, DEEP_CHAIN_LENGTH)]
        graph = Graph.from_edges(GraphKind.DIRECTED, DEEP_CHAIN_LENGTH, edges)
        post: list[int] = []

        breadth_first(graph, 1, post_visit=post.append)

        assert post == list(range(1, DEEP_CHAIN_LENGTH + 1))


class TestExactlyOnce:
    """Test that every vertex produces exactly one event of each kind."""

    GRAPHS = [
        Graph.from_edges(GraphKind.UNDIRECTED, 4, [(1, 2), (2, 3), (3, 4)]),
        Graph.from_edges(GraphKind.DIRECTED, 4, [(1, 2), (1, 3), (2, 4), (3, 4)]),
        Graph.from_edges(GraphKind.DIRECTED, 6, [(6, 1), (1, 6), (2, 2), (3, 5), (5, 3), (4, 1)]),
        Graph.from_edges(GraphKind.UNDIRECTED, 7, [(1, 2), (2, 3), (3, 1), (5, 6), (6, 7)]),
        Graph.from_edges(GraphKind.DIRECTED, 5, []),
    ]

    @pytest.mark.parametrize("graph", GRAPHS)
    @pytest.mark.parametrize("run", [run_dfs, run_bfs])
    def test_every_start(self, graph, run):
        """Test every start vertex on every graph."""
        vertices = list(graph.vertices())

        for start in vertices:
            events = run(graph, start)

            assert events.pre[0] == start
            assert sorted(events.pre) == vertices
            assert sorted(events.post) == vertices
            children = [child for child, _ in events.tree]
            assert len(children) == len(set(children))
            assert start not in children

    @pytest.mark.parametrize("graph", GRAPHS)
    @pytest.mark.parametrize("run", [run_dfs, run_bfs])
    def test_spanning_forest_is_acyclic(self, graph, run):
        """Test that following parents always ends at a root."""
        events = run(graph, 1)
        parents = dict(events.tree)

        for vertex in graph.vertices():
            seen = set()
            while vertex in parents:
                assert vertex not in seen
                seen.add(vertex)
                vertex = parents[vertex]

    @pytest.mark.parametrize("run", [run_dfs, run_bfs])
    def test_one_root_per_component(self, run):
        """Test that an undirected forest has one root per connected component."""
        graph = Graph.from_edges(GraphKind.UNDIRECTED, 7, [(1, 2), (2, 3), (3, 1), (5, 6), (6, 7)])

        events = run(graph, 6)
        children = {child for child, _ in events.tree}

        assert sorted(set(graph.vertices()) - children) == [1, 4, 6]

    @pytest.mark.parametrize("run", [run_dfs, run_bfs])
    def test_idempotent(self, run):
        """Test that repeated runs produce identical event logs."""
        graph = Graph.from_edges(GraphKind.DIRECTED, 6, [(6, 1), (1, 6), (2, 2), (3, 5), (5, 3), (4, 1)])

        assert run(graph, 3).log == run(graph, 3).log


class TestStartValidation:
    """Test start vertex validation."""

    @pytest.mark.parametrize("start", [0, 5, -1, True, "1", 1.0, None])
    def test_invalid_start(self, start):
        """Test that an out-of-range start raises before any hook fires."""
        fired: list[int] = []
        graph = path_graph()

        with pytest.raises(InvalidStartVertexError) as exc_info:
            depth_first(graph, start, pre_visit=fired.append)
        with pytest.raises(InvalidStartVertexError):
            breadth_first(graph, start, pre_visit=fired.append)

        assert fired == []
        assert exc_info.value.vertex_count == 4

    def test_empty_graph_has_no_valid_start(self):
        """Test that no start vertex is valid in an empty graph."""
        graph = Graph.from_edges(GraphKind.DIRECTED, 0, [])

        with pytest.raises(InvalidStartVertexError, match="outside the valid range"):
            depth_first(graph, 1)


class TestAbort:
    """Test aborting a traversal from a hook."""

    class Stop(Exception):
        """Raised by a hook to abort."""

    def test_hook_exception_propagates(self):
        """Test that an exception raised by a hook stops the traversal."""
        seen: list[int] = []

        def pre_visit(vertex):
            seen.append(vertex)
            if vertex == 3:
                raise self.Stop

        with pytest.raises(self.Stop):
            depth_first(path_graph(), 1, pre_visit=pre_visit)

        assert seen == [1, 2, 3]


class TestExploreDepthFirst:
    """Test a single depth-first tree walk over shared state."""

    def test_walk_confined_to_reachable(self):
        """Test that one walk only reaches vertices reachable from its root."""
        graph = diamond_graph()
        state = new_state(graph.vertex_count)
        pre: list[int] = []

        finished = explore_depth_first(graph, 2, state, pre_visit=pre.append)

        assert finished == 2
        assert pre == [2, 4]
        assert state[1] is VertexState.UNVISITED
        assert state[4] is VertexState.FINISHED

    def test_walks_skip_assigned_vertices(self):
        """Test that a later walk does not re-enter finished vertices."""
        graph = diamond_graph()
        state = new_state(graph.vertex_count)
        explore_depth_first(graph, 2, state)
        pre: list[int] = []

        explore_depth_first(graph, 1, state, pre_visit=pre.append)

        assert pre == [1, 3]
