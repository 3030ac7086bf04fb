"""Shortest-path service - Main orchestrator.

Loads a graph snapshot through the repository port, hands it to the
route solver and turns the outcome into something a front-end can
show.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import (
    GraphError,
    GraphParseError,
    NodeNotFoundError,
    NoPathFoundError,
)
from ..domain.models import PathResult
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


def describe_graph_error(error: GraphError) -> str:
    """Return a user-facing message for a graph loading failure."""
    if isinstance(error, GraphParseError):
        return f"Could not parse the graph from the input: {error}"
    return f"Could not load the graph: {error}"


@dataclass
class ShortestPathService:
    """Main service for answering shortest-path queries.

    Attributes:
        graph_repository: Produces the graph snapshot
        route_solver: Computes shortest paths
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_path(self, start: str, end: str) -> PathResult:
        """Find the minimum-weight path between two nodes.

        Raises:
            GraphError: If the graph cannot be loaded.
            NodeNotFoundError: If start or end is not in the graph.
            NoPathFoundError: If no path connects them.
        """
        start, end = start.strip(), end.strip()
        self._logger.info("Starting path search", extra={"start": start, "end": end})

        graph = self.graph_repository.load()
        self._logger.debug("Graph loaded", extra={"nodes": len(graph)})

        return self.route_solver.solve(graph, start, end)

    def find_path_safe(
        self, start: str, end: str
    ) -> tuple[Optional[PathResult], Optional[str]]:
        """Find a path, returning an error message instead of raising.

        Returns:
            Tuple of (PathResult or None, error message or None).
        """
        if not start.strip() or not end.strip():
            return None, "Start or End node is not specified."

        try:
            return self.find_path(start, end), None
        except GraphError as e:
            return None, describe_graph_error(e)
        except (NodeNotFoundError, NoPathFoundError) as e:
            return None, e.message

    def format_result(self, result: PathResult) -> str:
        """Format a path result as a human-readable string."""
        path_str = " -> ".join(result.path)
        return f"Shortest path: {path_str}\nTotal distance: {result.distance}"
