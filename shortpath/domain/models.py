"""Immutable domain models for the shortest-path toolkit.

All models are frozen dataclasses with slots. They have no external
dependencies and are safe to share between concurrent computations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GraphFormat(Enum):
    """Text notations understood by the graph parsers."""

    LIST = "list"
    MATRIX = "matrix"


@dataclass(frozen=True, slots=True)
class PathResult:
    """Minimum-weight path between two nodes.

    Attributes:
        path: Node identifiers from start to end, both inclusive
        distance: Sum of the edge weights along ``path``
    """

    path: tuple[str, ...]
    distance: int

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("A path result needs at least one node")
        if self.distance < 0:
            raise ValueError(f"Distance must be non-negative, got {self.distance}")

    @property
    def start(self) -> str:
        return self.path[0]

    @property
    def end(self) -> str:
        return self.path[-1]

    @property
    def num_nodes(self) -> int:
        """Return the number of nodes on the path."""
        return len(self.path)

    @property
    def num_edges(self) -> int:
        """Return the number of edges traversed."""
        return len(self.path) - 1

    @property
    def is_trivial(self) -> bool:
        """Check if start and end are the same node."""
        return len(self.path) == 1
