"""Graph algorithms on 1-based adjacency lists.

Iterative depth-first and breadth-first traversal with visitor hooks,
topological sorting, strongly connected components and bipartiteness
testing.
"""

from graphwalk.algorithms import (
    breadth_first,
    depth_first,
    is_acyclic,
    is_bipartite,
    strongly_connected_components,
    topological_sort,
    two_coloring,
    walk,
)
from graphwalk.errors import (
    CycleDetectedError,
    GraphError,
    InvalidStartVertexError,
    MalformedGraphError,
    NotBipartiteError,
)
from graphwalk.graph import Graph, GraphKind, load_graph, parse_graph, read_graph

__version__ = "0.1.0"

__all__ = [
    "CycleDetectedError",
    "Graph",
    "GraphError",
    "GraphKind",
    "InvalidStartVertexError",
    "MalformedGraphError",
    "NotBipartiteError",
    "breadth_first",
    "depth_first",
    "is_acyclic",
    "is_bipartite",
    "load_graph",
    "parse_graph",
    "read_graph",
    "strongly_connected_components",
    "topological_sort",
    "two_coloring",
    "walk",
]
