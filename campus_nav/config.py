"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
- data file locations (graph snapshot, GPS metadata)
- map rendering defaults
- logging

Configuration can be overridden via environment variables:
- CNAV_GRAPH_DATA_DIR=/path/to/data
- CNAV_MAP_ZOOM_START=18
- CNAV_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with CNAV_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CNAV_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    graph_file: str = "graph.json"
    locations_file: str = "gps_locations.json"

    @property
    def graph_path(self) -> Path:
        """Full path to the graph snapshot JSON file."""
        return self.data_dir / self.graph_file

    @property
    def locations_path(self) -> Path:
        """Full path to the GPS metadata JSON file."""
        return self.data_dir / self.locations_file


class MapConfig(BaseSettings):
    """Map rendering configuration.

    Environment variables prefixed with CNAV_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="CNAV_MAP_")

    tiles: str = "OpenStreetMap"
    zoom_start: int = 17
    # COEP main campus, used when no location has coordinates
    default_center: Tuple[float, float] = (18.5293, 73.8565)
    edge_color: str = "#999999"
    path_color: str = "#e74c3c"
    # Folium icon colours for markers off the path, by campus
    campus_colors: Dict[str, str] = {"North": "blue", "South": "purple"}
    marker_color: str = "gray"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CNAV_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CNAV_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.graph_path)
        print(config.map.zoom_start)

    Environment variables prefixed with CNAV_.
    """

    model_config = SettingsConfigDict(env_prefix="CNAV_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    map: MapConfig = Field(default_factory=MapConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)
    server_port: int = 5000

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


def configure_logging(config: ObservabilityConfig | None = None) -> None:
    """Apply the observability settings to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)
