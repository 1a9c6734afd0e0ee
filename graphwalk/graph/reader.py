"""Reader for the whitespace-separated edge-list graph format.

The format is a token stream::

    <kind> <vertex_count> <edge_count> u1 v1 u2 v2 ...

where ``<kind>`` is ``D`` for a directed graph or ``U`` for an undirected
one. Line breaks carry no meaning.

Example:
    >>> graph = parse_graph("U 4 3\\n1 2\\n2 3\\n3 4\\n")
    >>> graph.edge_count
    6
"""

from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

import structlog

from graphwalk.errors import MalformedGraphError
from graphwalk.graph.adjacency import Graph, GraphKind

logger = structlog.get_logger(__name__)

KIND_CODES: dict[str, GraphKind] = {
    "D": GraphKind.DIRECTED,
    "U": GraphKind.UNDIRECTED,
}


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        msg = f"Unexpected end of input while reading {what}"
        raise MalformedGraphError(msg) from None


def _next_int(tokens: Iterator[str], what: str) -> int:
    token = _next_token(tokens, what)
    # Plain ASCII decimal only, no "+", "_" separators or other digit scripts
    digits = token[1:] if token.startswith("-") else token
    if not (token.isascii() and digits.isdigit()):
        msg = f"Expected an integer for {what}, got {token!r}"
        raise MalformedGraphError(msg)
    return int(token)


def parse_graph(text: str) -> Graph:
    """Parse a graph from its textual edge-list description.

    Args:
        text: Complete file contents

    Returns:
        The constructed graph

    Raises:
        MalformedGraphError: If the header is missing or invalid, the edge list
            is short or contains non-integer tokens, or an id is out of range
    """
    tokens = iter(text.split())

    code = _next_token(tokens, "graph kind")
    if code not in KIND_CODES:
        msg = f"Unknown graph kind {code!r}, expected one of {sorted(KIND_CODES)}"
        raise MalformedGraphError(msg)
    kind = KIND_CODES[code]

    vertex_count = _next_int(tokens, "vertex count")
    edge_count = _next_int(tokens, "edge count")
    if vertex_count < 0 or edge_count < 0:
        msg = f"Counts must be non-negative, got {vertex_count} vertices and {edge_count} edges"
        raise MalformedGraphError(msg)

    edges = [
        (_next_int(tokens, f"edge {i + 1}"), _next_int(tokens, f"edge {i + 1}"))
        for i in range(edge_count)
    ]

    trailing = sum(1 for _ in tokens)
    if trailing:
        logger.warning("trailing_tokens_ignored", count=trailing, edge_count=edge_count)

    graph = Graph.from_edges(kind, vertex_count, edges)
    logger.info(
        "graph_parsed",
        kind=kind.value,
        vertex_count=graph.vertex_count,
        edge_count=graph.edge_count,
    )
    return graph


def read_graph(stream: TextIO) -> Graph:
    """Parse a graph from an open text stream."""
    return parse_graph(stream.read())


def load_graph(path: str | Path) -> Graph:
    """Load a graph from a file.

    Args:
        path: Path to the graph file

    Returns:
        The constructed graph

    Raises:
        FileNotFoundError: If the file doesn't exist
        MalformedGraphError: If the file contents are invalid
    """
    graph_path = Path(path)

    if not graph_path.exists():
        msg = f"Graph file not found: {graph_path}"
        raise FileNotFoundError(msg)

    logger.info("loading_graph", path=str(graph_path))

    with graph_path.open() as f:
        return read_graph(f)
