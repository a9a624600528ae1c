"""Immutable domain models for the Campus Navigator.

All models are frozen dataclasses with slots for memory efficiency.
These models have no external dependencies and represent the core
concepts of the application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class PathStatus(Enum):
    """Outcome of a shortest-path query.

    The values are the reason strings reported to callers.
    """

    FOUND = "Found"
    NO_PATH_FOUND = "NoPathFound"
    INVALID_ENDPOINT = "InvalidEndpoint"


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class Location:
    """Presentation metadata attached to a graph node.

    Locations are owned by the metadata repository. A location may
    exist without a graph node and vice versa.

    Attributes:
        name: Node name this metadata describes
        location: GPS coordinates
        campus: Grouping tag (e.g. 'North', 'South')
    """

    name: str
    location: GeoLocation
    campus: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Location:
        """Build a location from the ``{name, lat, lng, campus}`` record."""
        return cls(
            name=str(data["name"]),
            location=GeoLocation(
                latitude=float(data["lat"]), longitude=float(data["lng"])
            ),
            campus=str(data.get("campus") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "lat": self.location.latitude,
            "lng": self.location.longitude,
            "campus": self.campus,
        }


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected weighted edge, reported once per pair.

    Attributes:
        source: First endpoint
        target: Second endpoint
        weight: Distance between the endpoints
    """

    source: str
    target: str
    weight: float


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        path: Ordered node names from source to destination (inclusive)
        distance: Total distance, or None when no path was found
        status: Whether a path was found and, if not, why
    """

    path: tuple[str, ...] = field(default_factory=tuple)
    distance: Optional[float] = None
    status: PathStatus = PathStatus.FOUND

    @classmethod
    def found(cls, path: tuple[str, ...], distance: float) -> PathResult:
        return cls(path=path, distance=distance, status=PathStatus.FOUND)

    @classmethod
    def no_path(cls) -> PathResult:
        return cls(status=PathStatus.NO_PATH_FOUND)

    @classmethod
    def invalid_endpoint(cls) -> PathResult:
        return cls(status=PathStatus.INVALID_ENDPOINT)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of nodes in the route."""
        return len(self.path)

    @property
    def reason(self) -> Optional[str]:
        """Reason string for a failed query, None on success."""
        if self.status is PathStatus.FOUND:
            return None
        return self.status.value

    def to_dict(self) -> Dict[str, Any]:
        """Return the outcome in the shape the UI layer reports."""
        if self.status is PathStatus.FOUND:
            return {"path": list(self.path), "distance": self.distance}
        return {"path": [], "reason": self.status.value}
