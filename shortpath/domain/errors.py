"""Typed domain errors for the shortest-path toolkit.

"No path" is an expected outcome and the engine reports it by returning
``None``. These errors are raised by the layers around the engine
(parsers, repositories, solver adapters) and for internal invariant
violations that must never be papered over.

All errors inherit from ShortPathError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ShortPathError(Exception):
    """Base error for the shortest-path domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(ShortPathError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class GraphParseError(GraphError):
    """Graph text could not be parsed.

    Attributes:
        line_number: 1-based line of the offending input, if known
    """

    line_number: Optional[int] = None


@dataclass
class NodeNotFoundError(ShortPathError):
    """Node identifier not present in the graph.

    Attributes:
        node: The node identifier that was not found
    """

    node: str = ""


@dataclass
class NoPathFoundError(ShortPathError):
    """No edge sequence connects the requested nodes.

    Attributes:
        start: Start node identifier
        end: End node identifier
    """

    start: str = ""
    end: str = ""


@dataclass
class PathReconstructionError(ShortPathError):
    """Predecessor chain does not lead back to the start node.

    Raised when the end node has a finite distance but walking the
    predecessor table fails to reach the start node. This is a
    bookkeeping defect, not a normal "no path" outcome.

    Attributes:
        start: Start node identifier
        end: End node identifier
    """

    start: str = ""
    end: str = ""


@dataclass
class ConfigurationError(ShortPathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
