"""Immutable adjacency-list graph with 1-based vertex numbering.

This module provides the Graph class shared read-only by every algorithm in
the package. Vertices are the integers ``1..vertex_count``; slot ``0`` of the
internal adjacency table is reserved and always empty.
"""

from collections.abc import Iterable, Iterator, Sequence
from enum import Enum

import structlog

from graphwalk.errors import MalformedGraphError

logger = structlog.get_logger(__name__)


class GraphKind(str, Enum):
    """Orientation of a graph's edges.

    Attributes:
        DIRECTED: Each edge is stored once, from source to target
        UNDIRECTED: Each edge is stored in both directions
    """

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


def _is_vertex_id(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_vertex(value: object, vertex_count: int) -> int:
    if not _is_vertex_id(value):
        msg = f"Vertex id must be an integer, got {value!r}"
        raise MalformedGraphError(msg)
    if not 1 <= value <= vertex_count:
        msg = f"Vertex id {value} is outside the valid range [1, {vertex_count}]"
        raise MalformedGraphError(msg)
    return value


def _check_vertex_count(vertex_count: object) -> int:
    if not _is_vertex_id(vertex_count) or vertex_count < 0:
        msg = f"Vertex count must be a non-negative integer, got {vertex_count!r}"
        raise MalformedGraphError(msg)
    return vertex_count


class Graph:
    """Immutable adjacency-list graph.

    Instances are built once through ``from_adjacency`` or ``from_edges`` and
    never change afterwards, so a single graph can be handed to any number of
    algorithm calls.

    Example:
        >>> graph = Graph.from_edges(GraphKind.UNDIRECTED, 3, [(1, 2), (2, 3)])
        >>> graph.vertex_count, graph.edge_count
        (3, 4)
        >>> graph.neighbors(2)
        (1, 3)
    """

    __slots__ = ("_adjacency", "_edge_count", "_kind")

    def __init__(self, kind: GraphKind, adjacency: Sequence[Sequence[int]]):
        """Wrap a validated adjacency table.

        Args:
            kind: Orientation of the graph
            adjacency: Table of length ``vertex_count + 1``; entry ``0`` must be empty

        Raises:
            MalformedGraphError: If slot 0 is not empty or any entry is not an
                integer in ``[1, vertex_count]``
        """
        if not adjacency or len(adjacency[0]) != 0:
            msg = "Adjacency table must reserve an empty slot 0"
            raise MalformedGraphError(msg)

        vertex_count = len(adjacency) - 1
        self._kind = GraphKind(kind)
        self._adjacency: tuple[tuple[int, ...], ...] = tuple(
            tuple(_check_vertex(v, vertex_count) for v in row) for row in adjacency
        )
        self._edge_count = sum(len(row) for row in self._adjacency)

    @classmethod
    def from_adjacency(cls, kind: GraphKind, lists: Sequence[Iterable[int]]) -> "Graph":
        """Build a graph from per-vertex neighbor lists.

        Args:
            kind: Orientation of the graph
            lists: ``lists[i]`` holds the neighbors of vertex ``i + 1`` in order

        Returns:
            The constructed graph

        Raises:
            MalformedGraphError: If any neighbor id is not an integer in range

        Note:
            Lists are taken as-is. For undirected graphs both directions of
            every edge must already be present.
        """
        graph = cls(kind, [(), *lists])
        logger.debug(
            "graph_built",
            source="adjacency",
            kind=graph.kind.value,
            vertex_count=graph.vertex_count,
            edge_count=graph.edge_count,
        )
        return graph

    @classmethod
    def from_edges(
        cls,
        kind: GraphKind,
        vertex_count: int,
        edges: Iterable[Sequence[int]],
    ) -> "Graph":
        """Build a graph from a sequence of ``(u, v)`` pairs.

        Args:
            kind: Orientation of the graph
            vertex_count: Number of vertices ``N``
            edges: Pairs of vertex ids in ``[1, N]``

        Returns:
            The constructed graph; undirected graphs store ``v -> u`` as well

        Raises:
            MalformedGraphError: If the vertex count is negative or an edge is
                not a pair of in-range integer ids
        """
        kind = GraphKind(kind)
        vertex_count = _check_vertex_count(vertex_count)
        adjacency: list[list[int]] = [[] for _ in range(vertex_count + 1)]

        for edge in edges:
            try:
                source, target = edge
            except (TypeError, ValueError) as e:
                msg = f"Edge must be a (u, v) pair, got {edge!r}"
                raise MalformedGraphError(msg) from e
            u = _check_vertex(source, vertex_count)
            v = _check_vertex(target, vertex_count)
            adjacency[u].append(v)
            if kind is GraphKind.UNDIRECTED:
                adjacency[v].append(u)

        graph = cls(kind, adjacency)
        logger.debug(
            "graph_built",
            source="edges",
            kind=graph.kind.value,
            vertex_count=graph.vertex_count,
            edge_count=graph.edge_count,
        )
        return graph

    @property
    def kind(self) -> GraphKind:
        """Orientation of the graph."""
        return self._kind

    @property
    def vertex_count(self) -> int:
        """Number of vertices ``N``."""
        return len(self._adjacency) - 1

    @property
    def edge_count(self) -> int:
        """Total number of stored adjacency entries.

        Undirected graphs store each logical edge twice, so this is twice the
        number of input edges for them.
        """
        return self._edge_count

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        """Return the adjacency sequence of a vertex.

        Args:
            vertex: Vertex id in ``[1, vertex_count]``

        Returns:
            Neighbor ids in insertion order

        Raises:
            IndexError: If the vertex is out of range
        """
        if not 1 <= vertex <= self.vertex_count:
            msg = f"Vertex {vertex} is outside the valid range [1, {self.vertex_count}]"
            raise IndexError(msg)
        return self._adjacency[vertex]

    def vertices(self) -> range:
        """Return the vertex ids ``1..N`` in increasing order."""
        return range(1, self.vertex_count + 1)

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield every stored ``(u, v)`` entry in adjacency order."""
        for u in self.vertices():
            for v in self._adjacency[u]:
                yield u, v

    def transpose(self) -> "Graph":
        """Build the graph with every stored entry reversed.

        Sources are scanned in increasing order, so each reversed list keeps
        the order in which its entries were encountered.

        Returns:
            A new graph of the same kind and vertex count
        """
        reversed_lists: list[list[int]] = [[] for _ in range(self.vertex_count + 1)]
        for u, v in self.edges():
            reversed_lists[v].append(u)

        logger.debug("graph_transposed", vertex_count=self.vertex_count)
        return Graph(self._kind, reversed_lists)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._kind is other._kind and self._adjacency == other._adjacency

    def __hash__(self) -> int:
        return hash((self._kind, self._adjacency))

    def __repr__(self) -> str:
        return (
            f"Graph(kind={self._kind.value!r}, vertex_count={self.vertex_count}, "
            f"edge_count={self.edge_count})"
        )
