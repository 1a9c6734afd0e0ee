"""Traversal engine and the algorithms derived from it."""

from graphwalk.algorithms.bipartite import Color, is_bipartite, partition, two_coloring
from graphwalk.algorithms.components import (
    component_index,
    finishing_order,
    strongly_connected_components,
)
from graphwalk.algorithms.toposort import is_acyclic, topological_sort
from graphwalk.algorithms.traversal import (
    NO_PARENT,
    VertexState,
    breadth_first,
    depth_first,
    explore_depth_first,
)
from graphwalk.algorithms.visitors import (
    OrderRecorder,
    SpanningForest,
    Strategy,
    Traversal,
    walk,
)

__all__ = [
    "NO_PARENT",
    "Color",
    "OrderRecorder",
    "SpanningForest",
    "Strategy",
    "Traversal",
    "VertexState",
    "breadth_first",
    "component_index",
    "depth_first",
    "explore_depth_first",
    "finishing_order",
    "is_acyclic",
    "is_bipartite",
    "partition",
    "strongly_connected_components",
    "topological_sort",
    "two_coloring",
    "walk",
]
