"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CampusNavError,
    DuplicateNodeError,
    GraphError,
    InvalidEdgeError,
    InvalidNodeNameError,
    InvalidWeightError,
    LocationError,
    RenderingError,
    UnknownNodeError,
)
from .models import Edge, GeoLocation, Location, PathResult, PathStatus

__all__ = [
    # Models
    "Edge",
    "GeoLocation",
    "Location",
    "PathResult",
    "PathStatus",
    # Errors
    "CampusNavError",
    "DuplicateNodeError",
    "UnknownNodeError",
    "InvalidWeightError",
    "InvalidEdgeError",
    "InvalidNodeNameError",
    "GraphError",
    "LocationError",
    "RenderingError",
]
