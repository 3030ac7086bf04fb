"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the shortest-path core and the
adapters around it. They enable dependency injection and keep the
engine testable in isolation.
"""

from .frontier import FrontierEntry, FrontierPort
from .graph import Graph, GraphRepositoryPort, RouteSolverPort

__all__ = [
    # Graph
    "Graph",
    "GraphRepositoryPort",
    "RouteSolverPort",
    # Frontier
    "FrontierEntry",
    "FrontierPort",
]
