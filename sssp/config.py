"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
where the edge rows live, which operation to run, and how to log.

Configuration can be overridden via environment variables:
- SSSP_GRAPH_DATA_DIR=/path/to/data
- SSSP_GRAPH_SKIP_INVALID_ROWS=true
- SSSP_QUERY_OPERATION=all
- SSSP_QUERY_SOURCE_NODE=Seattle
- SSSP_QUERY_ROUTES='[["Seattle", "Dallas"], ["Dallas", "Miami"]]'
- SSSP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import Operation

DEFAULT_ROUTES: List[Tuple[str, str]] = [
    ("Grand Forks", "Seattle"),
    ("Seattle", "Los Angeles"),
    ("Los Angeles", "Dallas"),
    ("Dallas", "Miami"),
    ("Miami", "Boston"),
    ("Boston", "Chicago"),
    ("Chicago", "Grand Forks"),
]

DEFAULT_ADJACENCY_CHECKS: List[Tuple[str, str]] = [
    ("Chicago", "Milwaukee"),
    ("Chicago", "Grand Forks"),
]


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with SSSP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="SSSP_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    edges_file: str = "routes.csv"
    delimiter: str = ","
    encoding: str = "utf-8"
    has_header: bool = False
    skip_invalid_rows: bool = False

    @property
    def edges_path(self) -> Path:
        """Full path to the edge rows CSV file."""
        return self.data_dir / self.edges_file


class QueryConfig(BaseSettings):
    """Which operation to run and on which vertices.

    Environment variables prefixed with SSSP_QUERY_.
    """

    model_config = SettingsConfigDict(env_prefix="SSSP_QUERY_")

    operation: Operation = Operation.ROUTES
    source_node: str = "Chicago"
    routes: List[Tuple[str, str]] = Field(
        default_factory=lambda: list(DEFAULT_ROUTES)
    )
    adjacency_checks: List[Tuple[str, str]] = Field(
        default_factory=lambda: list(DEFAULT_ADJACENCY_CHECKS)
    )


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SSSP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SSSP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.query.source_node)
        print(config.graph.edges_path)

    Environment variables prefixed with SSSP_.
    """

    model_config = SettingsConfigDict(env_prefix="SSSP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


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
