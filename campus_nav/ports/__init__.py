"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .graph import Graph, GraphRepositoryPort, RouteSolverPort
from .locations import LocationRepositoryPort
from .rendering import MapRendererPort

__all__ = [
    # Graph
    "Graph",
    "GraphRepositoryPort",
    "RouteSolverPort",
    # Locations
    "LocationRepositoryPort",
    # Rendering
    "MapRendererPort",
]
