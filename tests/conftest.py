"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import json
from pathlib import Path

import pytest

from campus_nav.adapters.graph import DijkstraRouteSolver, JSONGraphRepository
from campus_nav.adapters.locations import JSONLocationRepository
from campus_nav.adapters.rendering import FoliumMapRenderer
from campus_nav.config import GraphConfig, MapConfig, reset_config
from campus_nav.container import reset_container
from campus_nav.graph import GraphStore
from campus_nav.services import CampusNavigatorService


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure no cached config or container leaks between tests."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def graph_config(tmp_path: Path) -> GraphConfig:
    return GraphConfig(data_dir=tmp_path)


@pytest.fixture
def triangle() -> dict:
    """A-B 5, B-C 3, A-C 10: the shortest A->C goes through B."""
    return {
        "A": {"B": 5.0, "C": 10.0},
        "B": {"A": 5.0, "C": 3.0},
        "C": {"A": 10.0, "B": 3.0},
    }


@pytest.fixture
def triangle_store(triangle: dict) -> GraphStore:
    return GraphStore.from_adjacency(triangle)


@pytest.fixture
def sample_locations() -> list:
    return [
        {"name": "A", "lat": 18.5289, "lng": 73.8553, "campus": "North"},
        {"name": "B", "lat": 18.5293, "lng": 73.8562, "campus": "North"},
        {"name": "C", "lat": 18.5305, "lng": 73.8574, "campus": "South"},
    ]


@pytest.fixture
def seeded_config(graph_config: GraphConfig, triangle: dict, sample_locations: list) -> GraphConfig:
    """Config whose data dir already holds the triangle graph and its GPS data."""
    graph_config.graph_path.write_text(json.dumps(triangle), encoding="utf-8")
    graph_config.locations_path.write_text(json.dumps(sample_locations), encoding="utf-8")
    return graph_config


@pytest.fixture
def service(seeded_config: GraphConfig) -> CampusNavigatorService:
    return CampusNavigatorService(
        graph_repository=JSONGraphRepository(seeded_config),
        route_solver=DijkstraRouteSolver(),
        location_repository=JSONLocationRepository(seeded_config),
        map_renderer=FoliumMapRenderer(MapConfig()),
    )
