"""Graph container and construction.

This module provides the immutable adjacency-list Graph and the reader for
the textual edge-list format.
"""

from graphwalk.graph.adjacency import Graph, GraphKind
from graphwalk.graph.reader import load_graph, parse_graph, read_graph

__all__ = ["Graph", "GraphKind", "load_graph", "parse_graph", "read_graph"]
