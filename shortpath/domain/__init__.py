"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    GraphParseError,
    NodeNotFoundError,
    NoPathFoundError,
    PathReconstructionError,
    ShortPathError,
)
from .models import GraphFormat, PathResult

__all__ = [
    # Models
    "GraphFormat",
    "PathResult",
    # Errors
    "ShortPathError",
    "GraphError",
    "GraphParseError",
    "NodeNotFoundError",
    "NoPathFoundError",
    "PathReconstructionError",
    "ConfigurationError",
]
