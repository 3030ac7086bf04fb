"""Text-file Graph Repository adapter.

Loads a graph written in the adjacency-list or adjacency-matrix
notation, validates it and caches the result. Paths and notation come
from GraphConfig.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import GraphFormat
from ...graph.load_graph import (
    MutableGraph,
    parse_adjacency_list,
    parse_adjacency_matrix,
    validate_graph,
)
from ...ports.graph import Graph


def parse_graph_text(
    text: str, graph_format: GraphFormat, node_names: str = ""
) -> MutableGraph:
    """Parse graph text in either notation.

    For the matrix notation, an empty ``node_names`` means the first
    non-blank line of ``text`` holds the comma-separated names.
    """
    if graph_format is GraphFormat.LIST:
        return parse_adjacency_list(text)

    if node_names:
        return parse_adjacency_matrix(text, node_names)

    lines = text.splitlines()
    header = next((i for i, line in enumerate(lines) if line.strip()), None)
    if header is None:
        return {}
    # Rows start on the line after the header; keep file line numbers.
    return parse_adjacency_matrix(
        "\n".join(lines[header + 1 :]), lines[header], first_line=header + 2
    )


@dataclass
class TextGraphRepository:
    """Graph repository that loads from a text file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (path, notation, node names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph_format(self) -> GraphFormat:
        return GraphFormat(self.config.input_format)

    def load(self) -> Graph:
        """Load the graph from the configured file.

        Returns:
            The graph as a mapping of node identifiers to neighbors.

        Raises:
            GraphError: If the file cannot be read or is not a valid graph.
                Parse failures surface as GraphParseError.
        """
        if self._graph is not None:
            return self._graph

        path = self.config.graph_path
        self._logger.debug(
            "Loading graph",
            extra={"graph_path": str(path), "graph_format": self.graph_format.value},
        )

        try:
            text = path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise GraphError(
                f"Failed to read graph file {path}",
                file_path=str(path),
                cause=e,
            ) from e

        try:
            graph = parse_graph_text(text, self.graph_format, self.config.node_names)
            validate_graph(graph)
        except GraphError as e:
            e.file_path = str(path)
            raise

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "graph_path": str(path)},
        )
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
