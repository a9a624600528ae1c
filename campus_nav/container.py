"""Application wiring.

Builds the adapters from config and hands them to the navigator
service. Any adapter can be passed in to replace the default, which is
how tests swap in fakes.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from .adapters.graph import DijkstraRouteSolver, JSONGraphRepository
from .adapters.locations import JSONLocationRepository
from .adapters.rendering import FoliumMapRenderer
from .config import AppConfig, get_config
from .ports.graph import GraphRepositoryPort, RouteSolverPort
from .ports.locations import LocationRepositoryPort
from .ports.rendering import MapRendererPort
from .services import CampusNavigatorService


@dataclass
class Container:
    """Adapters and the navigator service for one configuration.

    Usage:
        # Production
        navigator = get_container().navigator

        # Testing
        container = Container(config, graph_repository=FakeRepository())
        navigator = container.navigator

    The navigator loads the graph when it is built, so it is created on
    first access rather than with the container.
    """

    config: AppConfig = field(default_factory=get_config)
    graph_repository: Optional[GraphRepositoryPort] = None
    location_repository: Optional[LocationRepositoryPort] = None
    route_solver: Optional[RouteSolverPort] = None
    map_renderer: Optional[MapRendererPort] = None

    _navigator: Optional[CampusNavigatorService] = field(
        default=None, init=False, repr=False
    )
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        if self.graph_repository is None:
            self.graph_repository = JSONGraphRepository(self.config.graph)
        if self.location_repository is None:
            self.location_repository = JSONLocationRepository(self.config.graph)
        if self.route_solver is None:
            self.route_solver = DijkstraRouteSolver()
        if self.map_renderer is None:
            self.map_renderer = FoliumMapRenderer(self.config.map)

    @property
    def navigator(self) -> CampusNavigatorService:
        """The navigator service, built on first use.

        Raises:
            GraphError: If the stored graph cannot be loaded.
        """
        with self._lock:
            if self._navigator is None:
                self._navigator = CampusNavigatorService(
                    graph_repository=self.graph_repository,
                    route_solver=self.route_solver,
                    location_repository=self.location_repository,
                    map_renderer=self.map_renderer,
                )
            return self._navigator


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, creating it from config."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container()
        return _default_container


def reset_container() -> None:
    """Forget the process-wide container so the next call rebuilds it."""
    global _default_container
    with _container_lock:
        _default_container = None
