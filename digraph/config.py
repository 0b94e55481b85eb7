"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the settings used by
the adapters and the command-line launcher. The graph engine itself
takes no configuration.

Configuration can be overridden via environment variables:
- DIGRAPH_GRAPH_DATA_DIR=/path/to/data
- DIGRAPH_SEARCH_DEFAULT_ALGORITHM=bfs
- DIGRAPH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Algorithm = Literal["dfs", "bfs", "dijkstra"]


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with DIGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="DIGRAPH_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    vertices_file: str = "vertices.csv"
    edges_file: str = "edges.csv"

    @property
    def vertices_path(self) -> Path:
        """Full path to vertices CSV file."""
        return self.data_dir / self.vertices_file

    @property
    def edges_path(self) -> Path:
        """Full path to edges CSV file."""
        return self.data_dir / self.edges_file


class SearchConfig(BaseSettings):
    """Path search configuration.

    Environment variables prefixed with DIGRAPH_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="DIGRAPH_SEARCH_")

    default_algorithm: Algorithm = "dijkstra"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with DIGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="DIGRAPH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.search.default_algorithm)
        print(config.graph.edges_path)

    Environment variables prefixed with DIGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="DIGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
