"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration:
which frontier the engine uses, where graph files live and how they
are written, and how logging is set up.

Configuration can be overridden via environment variables:
- SHORTPATH_ENGINE_FRONTIER=sorted
- SHORTPATH_GRAPH_DATA_DIR=/path/to/data
- SHORTPATH_GRAPH_INPUT_FORMAT=matrix
- SHORTPATH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineConfig(BaseSettings):
    """Shortest-path engine configuration.

    Environment variables prefixed with SHORTPATH_ENGINE_.
    """

    model_config = SettingsConfigDict(env_prefix="SHORTPATH_ENGINE_")

    frontier: Literal["heap", "sorted"] = "heap"


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with SHORTPATH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="SHORTPATH_GRAPH_")

    data_dir: Path = Field(default_factory=lambda: Path.cwd() / "data")
    graph_file: str = "graph.txt"
    input_format: Literal["list", "matrix"] = "list"
    # Matrix only. When empty, the first non-blank line of the file holds
    # the comma-separated names.
    node_names: str = ""
    encoding: str = "utf-8"

    @property
    def graph_path(self) -> Path:
        """Full path to the graph file."""
        return self.data_dir / self.graph_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SHORTPATH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SHORTPATH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.engine.frontier)
        print(config.graph.graph_path)

    Environment variables prefixed with SHORTPATH_.
    """

    model_config = SettingsConfigDict(env_prefix="SHORTPATH_")

    engine: EngineConfig = Field(default_factory=EngineConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
