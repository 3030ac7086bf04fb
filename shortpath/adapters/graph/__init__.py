"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextGraphRepository: Loads a graph from an adjacency-list or matrix file
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .text_repository import TextGraphRepository, parse_graph_text

__all__ = ["DijkstraRouteSolver", "TextGraphRepository", "parse_graph_text"]
