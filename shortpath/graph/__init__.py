"""Graph-related utilities: the shortest-path engine and its inputs.

This subpackage contains the priority frontiers, the Dijkstra engine
and the helpers that build validated graphs from text or edge lists.
"""

from .dijkstra import reconstruct_path, shortest_path
from .frontier import HeapFrontier, SortedFrontier, make_frontier

__all__ = [
    "HeapFrontier",
    "SortedFrontier",
    "make_frontier",
    "reconstruct_path",
    "shortest_path",
]
