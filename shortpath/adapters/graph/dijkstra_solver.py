"""Dijkstra Route Solver adapter.

This adapter wraps the engine in graph/dijkstra.py and adds:
- Frontier selection from configuration
- Typed errors for missing nodes and unreachable targets
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import EngineConfig, get_config
from ...domain.errors import NodeNotFoundError, NoPathFoundError
from ...domain.models import PathResult
from ...graph.dijkstra import shortest_path
from ...graph.frontier import make_frontier
from ...ports.graph import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. Every call builds its own
    frontier and tables, so one solver can serve concurrent callers.

    Attributes:
        config: Engine configuration (frontier kind)
    """

    config: EngineConfig = field(default_factory=lambda: get_config().engine)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, start: str, end: str) -> PathResult:
        """Find the minimum-weight path between two nodes.

        Args:
            graph: The undirected graph snapshot.
            start: Start node identifier.
            end: End node identifier.

        Returns:
            PathResult with the path and its total weight.

        Raises:
            NodeNotFoundError: If start or end is not in the graph.
            NoPathFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"start": start, "end": end, "frontier": self.config.frontier},
        )

        if start not in graph:
            raise NodeNotFoundError(
                f'Start node "{start}" does not exist in the graph.',
                node=start,
            )
        if end not in graph:
            raise NodeNotFoundError(
                f'End node "{end}" does not exist in the graph.',
                node=end,
            )

        result = self._run(graph, start, end)

        if result is None:
            self._logger.warning(
                "No route found",
                extra={"start": start, "end": end},
            )
            raise NoPathFoundError(
                f'No path found from "{start}" to "{end}".',
                start=start,
                end=end,
            )

        self._logger.info(
            "Route found",
            extra={
                "start": start,
                "end": end,
                "nodes": result.num_nodes,
                "distance": result.distance,
            },
        )
        return result

    def solve_safe(self, graph: Graph, start: str, end: str) -> Optional[PathResult]:
        """Find the shortest path, returning None on failure.

        Like solve(), but missing nodes and unreachable targets both
        yield None instead of raising.
        """
        return self._run(graph, start, end)

    def _run(self, graph: Graph, start: str, end: str) -> Optional[PathResult]:
        return shortest_path(graph, start, end, make_frontier(self.config.frontier))
