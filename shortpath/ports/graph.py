"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts between the shortest-path engine
and the collaborators that produce graphs and consume results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult

# Maps node identifier -> {neighbor identifier: non-negative edge weight}.
# Undirected: every edge appears under both of its endpoints.
Graph = Mapping[str, Mapping[str, int]]


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/text_repository.py

    The repository is responsible for producing a valid, symmetric
    graph snapshot. The engine never validates what it is given.
    """

    def load(self) -> Graph:
        """Load the graph.

        Returns:
            The graph as a mapping of node identifiers to neighbors.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for shortest-path computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: Graph, start: str, end: str) -> PathResult:
        """Find the minimum-weight path between two nodes.

        Raises:
            NodeNotFoundError: If start or end is not in the graph.
            NoPathFoundError: If no path connects them.
        """
        ...

    def solve_safe(self, graph: Graph, start: str, end: str) -> Optional[PathResult]:
        """Like solve(), but returns None instead of raising."""
        ...
