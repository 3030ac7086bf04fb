"""Graph construction from text notations and edge lists.

This module holds the helpers that produce Graph values: parsers for
the adjacency-list and adjacency-matrix notations, the matching
serializers, an edge-list builder and a validator. Every graph produced
here is symmetric and carries non-negative integer weights, which is
what the engine expects.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..domain.errors import GraphError, GraphParseError
from ..ports.graph import Graph

MutableGraph = Dict[str, Dict[str, int]]
Edge = Tuple[str, str, int]


def _is_plain_int(token: str) -> bool:
    # int() alone would also take "+3", "1_000" and non-ASCII digits.
    return token.isascii() and token.isdigit()


def _parse_weight(token: str, line_number: int) -> int:
    if not _is_plain_int(token):
        raise GraphParseError(
            f"Invalid weight {token!r} on line {line_number}: "
            "weight must be a non-negative integer",
            line_number=line_number,
        )
    return int(token)


def _add_edge(graph: MutableGraph, u: str, v: str, weight: int) -> None:
    graph.setdefault(u, {})[v] = weight
    graph.setdefault(v, {})[u] = weight


def parse_adjacency_list(text: str) -> MutableGraph:
    """Parse ``Node1 Node2 Weight`` lines into an undirected graph.

    Blank lines are skipped. A line with a single token declares an
    isolated node. Repeating an edge keeps the last weight.

    Raises:
        GraphParseError: On a malformed line or weight.
    """
    graph: MutableGraph = {}

    for line_number, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) == 1:
            graph.setdefault(parts[0], {})
            continue
        if len(parts) != 3:
            raise GraphParseError(
                f"Invalid line format on line {line_number}: {line.strip()!r}. "
                "Expected format: Node1 Node2 Weight",
                line_number=line_number,
            )
        u, v, weight_str = parts
        _add_edge(graph, u, v, _parse_weight(weight_str, line_number))

    return graph


def split_node_names(node_names: Union[str, Sequence[str]]) -> List[str]:
    """Normalize comma-separated or sequence node names, dropping blanks."""
    if isinstance(node_names, str):
        node_names = node_names.split(",")
    return [name.strip() for name in node_names if name.strip()]


def parse_adjacency_matrix(
    matrix_text: str,
    node_names: Union[str, Sequence[str]],
    first_line: int = 1,
) -> MutableGraph:
    """Parse a square weight matrix into an undirected graph.

    Row ``i``, column ``j`` holds the weight between ``node_names[i]``
    and ``node_names[j]``; ``0`` means no edge. A positive cell creates
    the edge in both directions, so a triangular matrix is enough.

    ``first_line`` is the line number of the first line of
    ``matrix_text`` in its source, used when reporting errors.

    Raises:
        GraphParseError: On malformed names, shape, cells or on two
            mirrored cells that disagree.
    """
    names = split_node_names(node_names)
    rows = [
        (line_number, row.split())
        for line_number, row in enumerate(matrix_text.splitlines(), start=first_line)
        if row.strip()
    ]

    if not names:
        if rows:
            raise GraphParseError(
                "Node names are required for adjacency matrix if matrix data is provided."
            )
        return {}

    if len(set(names)) != len(names):
        raise GraphParseError("Node names must be unique.")

    graph: MutableGraph = {name: {} for name in names}
    if not rows:
        return graph

    size = len(names)
    if len(rows) != size:
        raise GraphParseError(
            f"Matrix row count ({len(rows)}) must match node names count ({size})."
        )

    for i, (line_number, row) in enumerate(rows):
        if len(row) != size:
            raise GraphParseError(
                f"Matrix column count in row {i + 1} ({len(row)}) "
                f"must match node names count ({size}).",
                line_number=line_number,
            )
        for j, cell in enumerate(row):
            if cell[:1] == "-" and _is_plain_int(cell[1:]):
                raise GraphParseError(
                    f"Invalid matrix value {cell!r} at [{i + 1},{j + 1}]. "
                    "Weights must be non-negative.",
                    line_number=line_number,
                )
            if not _is_plain_int(cell):
                raise GraphParseError(
                    f"Invalid matrix value {cell!r} at [{i + 1},{j + 1}]. Must be an integer.",
                    line_number=line_number,
                )
            weight = int(cell)
            if weight == 0:
                continue
            u, v = names[i], names[j]
            existing = graph[u].get(v)
            if existing is not None and existing != weight:
                raise GraphParseError(
                    f"Asymmetric matrix: [{i + 1},{j + 1}] is {weight} "
                    f"but [{j + 1},{i + 1}] is {existing}.",
                    line_number=line_number,
                )
            _add_edge(graph, u, v, weight)

    return graph


def build_graph(edges: Iterable[Edge], nodes: Iterable[str] = ()) -> MutableGraph:
    """Build an undirected graph from ``(node, node, weight)`` triples.

    Nodes listed in ``nodes`` are included even when they have no edge.

    Raises:
        GraphError: If a weight is negative or not an integer.
    """
    graph: MutableGraph = {node: {} for node in nodes}
    for u, v, weight in edges:
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise GraphError(
                f"Invalid weight {weight!r} for edge {u}-{v}: "
                "weight must be a non-negative integer"
            )
        _add_edge(graph, u, v, weight)
    return graph


def validate_graph(graph: Graph) -> None:
    """Check that ``graph`` is a well-formed undirected graph.

    Raises:
        GraphError: On a negative or non-integer weight, a neighbor that
            is not itself a node, or an edge missing its mirror.
    """
    for u, neighbors in graph.items():
        for v, weight in neighbors.items():
            if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
                raise GraphError(
                    f"Invalid weight {weight!r} for edge {u}-{v}: "
                    "weight must be a non-negative integer"
                )
            if v not in graph:
                raise GraphError(f"Neighbor {v} of {u} is not a node of the graph")
            if graph[v].get(u) != weight:
                raise GraphError(
                    f"Edge {u}-{v} has weight {weight} but {v}-{u} "
                    f"has {graph[v].get(u)!r}"
                )


def _unique_edges(graph: Graph) -> List[Edge]:
    seen = set()
    edges: List[Edge] = []
    for u, neighbors in graph.items():
        for v, weight in neighbors.items():
            key = frozenset((u, v))
            if key in seen:
                continue
            seen.add(key)
            edges.append((u, v, weight))
    return edges


def format_adjacency_list(graph: Graph) -> str:
    """Serialize a graph as ``Node1 Node2 Weight`` lines.

    Each undirected edge is written once. Isolated nodes are written as
    single-token lines so the output parses back to the same graph.
    """
    lines = [f"{u} {v} {weight}" for u, v, weight in _unique_edges(graph)]
    lines.extend(node for node, neighbors in graph.items() if not neighbors)
    return "\n".join(lines)


def format_adjacency_matrix(
    graph: Graph, node_names: Optional[Union[str, Sequence[str]]] = None
) -> Tuple[str, List[str]]:
    """Serialize a graph as a weight matrix.

    Columns follow ``node_names`` first, then any remaining graph nodes
    in graph order. Missing edges are written as ``0``.

    Returns:
        The matrix text and the node names in column order.

    Raises:
        GraphError: If the graph has a zero-weight edge, which the
            matrix notation cannot tell apart from a missing edge.
    """
    for u, v, weight in _unique_edges(graph):
        if weight == 0:
            raise GraphError(
                f"Edge {u}-{v} has weight 0, which the adjacency matrix "
                "notation reads as no edge. Use the adjacency list notation."
            )

    names = split_node_names(node_names) if node_names is not None else []
    known = set(names)
    names.extend(node for node in graph if node not in known)

    rows = []
    for u in names:
        neighbors = graph.get(u, {})
        rows.append(" ".join(str(neighbors.get(v, 0)) for v in names))
    return "\n".join(rows), names
