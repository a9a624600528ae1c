"""Campus navigator service - Main orchestrator.

This service owns the GraphStore for the running application and
brackets every mutation with persistence:

1. Load the graph snapshot before serving
2. Apply a mutation to the in-memory store
3. Save the snapshot; on failure, restore the previous state

Path queries run on an immutable snapshot and never touch storage.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence, TypeVar

from geopy.distance import geodesic

from ..domain.errors import GraphError, LocationError, RenderingError
from ..domain.models import GeoLocation, Location, PathResult
from ..graph.store import GraphSnapshot, GraphStore
from ..ports.graph import GraphRepositoryPort, RouteSolverPort
from ..ports.locations import LocationRepositoryPort
from ..ports.rendering import MapRendererPort

T = TypeVar("T")


@dataclass
class CampusNavigatorService:
    """Main service for editing the campus graph and finding paths.

    Attributes:
        graph_repository: Loads and saves the graph snapshot
        route_solver: Computes shortest paths
        location_repository: Optional GPS metadata storage
        map_renderer: Optional map rendering
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    location_repository: Optional[LocationRepositoryPort] = None
    map_renderer: Optional[MapRendererPort] = None

    _store: GraphStore = field(init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._store = GraphStore.from_adjacency(self.graph_repository.load())
        self._logger.info(
            "Campus graph ready",
            extra={"nodes": self._store.node_count, "edges": self._store.edge_count},
        )

    # ------------------------------------------------------------------
    # Graph
    # ------------------------------------------------------------------
    @property
    def store(self) -> GraphStore:
        return self._store

    def reload(self) -> None:
        """Replace the in-memory graph with the stored snapshot.

        Raises:
            GraphError: If the stored snapshot cannot be loaded.
        """
        with self._lock:
            self._store = GraphStore.from_adjacency(self.graph_repository.load())
        self._logger.info("Campus graph reloaded", extra={"nodes": self._store.node_count})

    def graph(self) -> GraphSnapshot:
        """Return an immutable snapshot of the whole graph."""
        return self._store.snapshot()

    def list_nodes(self) -> List[str]:
        """Node names, sorted for display."""
        return sorted(self._store.nodes())

    def add_location(self, name: str) -> None:
        """Add a node with no paths.

        Raises:
            DuplicateNodeError: If the location already exists.
            InvalidNodeNameError: If the name is empty.
            GraphError: If the graph cannot be saved.
        """
        self._mutate(lambda: self._store.add_node(name))

    def add_path(self, source: str, target: str, distance: float) -> None:
        """Create or update the path between two existing locations.

        Raises:
            UnknownNodeError: If either location is missing.
            InvalidWeightError: If distance is not a finite positive number.
            InvalidEdgeError: If source and target are the same.
            GraphError: If the graph cannot be saved.
        """
        self._mutate(lambda: self._store.add_or_update_edge(source, target, distance))

    def remove_path(self, source: str, target: str) -> bool:
        """Remove the path between two locations if there is one.

        Unknown locations are not an error.

        Returns:
            True if a path was removed.
        """
        return self._mutate(lambda: self._store.remove_edge(source, target))

    def delete_location(self, name: str) -> None:
        """Delete a location together with all its paths.

        Raises:
            UnknownNodeError: If the location does not exist.
            GraphError: If the graph cannot be saved.
        """
        self._mutate(lambda: self._store.delete_node(name))

    def find_path(self, source: str, destination: str) -> PathResult:
        """Shortest path between two locations on the current snapshot."""
        return self.route_solver.solve(self._store.snapshot(), source, destination)

    def _mutate(self, operation: Callable[[], T]) -> T:
        with self._lock:
            before = self._store.to_dict()
            result = operation()
            after = self._store.to_dict()
            if after == before:
                return result
            try:
                self.graph_repository.save(after)
            except GraphError:
                self._store = GraphStore.from_adjacency(before)
                self._logger.error("Graph save failed, mutation rolled back")
                raise
            return result

    # ------------------------------------------------------------------
    # GPS metadata
    # ------------------------------------------------------------------
    def list_gps_locations(self) -> Sequence[Location]:
        if self.location_repository is None:
            return []
        return self.location_repository.list_locations()

    def get_gps_location(self, name: str) -> Optional[Location]:
        if self.location_repository is None:
            return None
        return self.location_repository.get_location(name)

    def add_gps_location(
        self, name: str, lat: float, lng: float, campus: str = ""
    ) -> Location:
        """Attach GPS metadata to a name.

        The name does not have to be a graph node.

        Raises:
            LocationError: If coordinates are invalid or the name exists.
        """
        location = self._build_location(name, lat, lng, campus)
        return self._locations().add_location(location)

    def update_gps_location(
        self, name: str, lat: float, lng: float, campus: str = ""
    ) -> Location:
        """Replace the GPS metadata of a name.

        Raises:
            LocationError: If coordinates are invalid or the name is unknown.
        """
        location = self._build_location(name, lat, lng, campus)
        return self._locations().update_location(location)

    def estimate_distance(self, source: str, target: str) -> Optional[float]:
        """Geodesic distance in metres between two located names.

        Returns:
            The distance rounded to one decimal, or None if either name
            has no GPS metadata.
        """
        a = self.get_gps_location(source)
        b = self.get_gps_location(target)
        if a is None or b is None:
            return None
        meters = geodesic(
            (a.location.latitude, a.location.longitude),
            (b.location.latitude, b.location.longitude),
        ).meters
        return round(meters, 1)

    def _locations(self) -> LocationRepositoryPort:
        if self.location_repository is None:
            raise LocationError("GPS metadata storage is not configured")
        return self.location_repository

    @staticmethod
    def _build_location(name: str, lat: float, lng: float, campus: str) -> Location:
        if not isinstance(name, str) or not name.strip():
            raise LocationError("Name, latitude, and longitude are required", name=str(name))
        if lat is None or lng is None:
            raise LocationError("Name, latitude, and longitude are required", name=name)
        try:
            geo = GeoLocation(latitude=float(lat), longitude=float(lng))
        except (TypeError, ValueError) as e:
            raise LocationError(f"Invalid coordinates for '{name}'", name=name, cause=e)
        return Location(name=name, location=geo, campus=campus or "")

    # ------------------------------------------------------------------
    # Map
    # ------------------------------------------------------------------
    def render_map(
        self,
        path: Optional[Sequence[str]] = None,
        output_path: Optional[Path] = None,
    ) -> str:
        """Render the campus map, optionally highlighting a path.

        Args:
            path: Node sequence to highlight.
            output_path: Also save the map there when given.

        Returns:
            The map as a standalone HTML document.

        Raises:
            RenderingError: If no renderer is configured or rendering fails.
        """
        if self.map_renderer is None:
            raise RenderingError("Map rendering is not configured")

        locations = self.list_gps_locations()
        snapshot = self._store.snapshot()
        if output_path is not None:
            self.map_renderer.render(locations, snapshot, output_path, path=path)
        return self.map_renderer.render_html(locations, snapshot, path=path)
