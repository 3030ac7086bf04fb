"""Top-level package for the shortpath project.

The core is a Dijkstra shortest-path engine over undirected graphs
with non-negative integer weights. Around it sit the parsers that turn
adjacency-list and adjacency-matrix text into graphs, a file-backed
repository, a solver adapter with typed errors and a small CLI.
"""

from .domain.models import PathResult
from .graph.dijkstra import shortest_path

__all__ = ["PathResult", "shortest_path"]
