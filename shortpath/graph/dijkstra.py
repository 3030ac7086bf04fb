"""Shortest-path computation using Dijkstra's algorithm.

Nodes are settled in non-decreasing distance order from the start
node. The search stops as soon as the end node is settled, and the
path is rebuilt from the predecessor table.

Edge weights must be non-negative. Nothing here re-validates the
graph; see ``load_graph.validate_graph`` for that.
"""

from __future__ import annotations

import math
from typing import Dict, List, Mapping, Optional

from ..domain.errors import PathReconstructionError
from ..domain.models import PathResult
from ..ports.frontier import FrontierPort
from ..ports.graph import Graph
from .frontier import HeapFrontier


def shortest_path(
    graph: Graph,
    start: str,
    end: str,
    frontier: Optional[FrontierPort] = None,
) -> Optional[PathResult]:
    """Compute the minimum-weight path between two nodes.

    Parameters
    ----------
    graph:
        Undirected graph snapshot. Treated as read-only.
    start:
        Identifier of the first node of the path.
    end:
        Identifier of the last node of the path.
    frontier:
        Empty priority frontier to drive the search. A fresh
        ``HeapFrontier`` is used when omitted.

    Returns
    -------
    PathResult or None
        The path from ``start`` to ``end`` (inclusive) and its total
        weight. ``None`` if either node is missing from the graph or
        no path connects them.

    Raises
    ------
    PathReconstructionError
        If the predecessor table is inconsistent with the distances.
    """
    if start not in graph or end not in graph:
        return None

    if frontier is None:
        frontier = HeapFrontier()

    distances: Dict[str, float] = {}
    previous: Dict[str, Optional[str]] = {}
    for node in graph:
        distances[node] = 0 if node == start else math.inf
        previous[node] = None
        frontier.insert(node, distances[node])

    while True:
        entry = frontier.extract_min()
        if entry is None:
            return None

        u, priority = entry

        # Superseded by a later decrease; the live entry comes first.
        if priority != distances.get(u):
            continue

        current_distance = distances[u]
        if current_distance == math.inf:
            return None

        if u == end:
            break

        for v, weight in graph.get(u, {}).items():
            new_distance = current_distance + weight
            if new_distance < distances.get(v, math.inf):
                distances[v] = new_distance
                previous[v] = u
                frontier.decrease_priority(v, new_distance)

    path = reconstruct_path(previous, start, end)
    return PathResult(path=tuple(path), distance=distances[end])


def reconstruct_path(
    previous: Mapping[str, Optional[str]], start: str, end: str
) -> List[str]:
    """Follow predecessor links from ``end`` back to ``start``.

    Returns the nodes in start-to-end order. A chain that breaks off or
    cycles before reaching ``start`` raises PathReconstructionError;
    no partial path is ever returned.
    """
    path: List[str] = [end]
    current: Optional[str] = end

    # A simple path visits each node at most once.
    for _ in range(len(previous) + 1):
        if current == start:
            break
        current = previous.get(current)
        if current is None:
            raise PathReconstructionError(
                f"Predecessor chain from {end} stops before reaching {start}",
                start=start,
                end=end,
            )
        path.append(current)
    else:
        raise PathReconstructionError(
            f"Predecessor chain from {end} loops without reaching {start}",
            start=start,
            end=end,
        )

    path.reverse()
    return path
