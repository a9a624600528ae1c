"""JSON Location Repository adapter.

Keeps GPS metadata as a JSON array of ``{name, lat, lng, campus}``
records. Metadata is loaded once and cached; every change is written
back to disk immediately.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import LocationError
from ...domain.models import Location
from ..json_io import read_json, write_json_atomic


@dataclass
class JSONLocationRepository:
    """Location repository backed by a JSON file.

    This adapter implements LocationRepositoryPort. Records with missing
    or out-of-range coordinates are skipped with a warning rather than
    failing the whole load.

    Attributes:
        config: Graph configuration (data dir, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data, keyed by name in file order
    _locations: Optional[Dict[str, Location]] = field(default=None, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def list_locations(self) -> Sequence[Location]:
        """List all locations.

        Returns:
            Every stored location, in file order.
        """
        with self._lock:
            return list(self._load().values())

    def get_location(self, name: str) -> Optional[Location]:
        """Get location metadata by node name.

        Returns:
            The location, or None if the node has no metadata.
        """
        with self._lock:
            return self._load().get(name)

    def add_location(self, location: Location) -> Location:
        """Add metadata for a new name.

        Raises:
            LocationError: If the name already has metadata or saving fails.
        """
        with self._lock:
            locations = self._load()
            if location.name in locations:
                raise LocationError(
                    f"Location with name '{location.name}' already exists",
                    name=location.name,
                )
            updated = dict(locations)
            updated[location.name] = location
            self._save(updated)
        self._logger.info(
            "GPS location added",
            extra={"location": location.name, "campus": location.campus},
        )
        return location

    def update_location(self, location: Location) -> Location:
        """Replace the metadata stored under ``location.name``.

        Raises:
            LocationError: If the name has no metadata or saving fails.
        """
        with self._lock:
            locations = self._load()
            if location.name not in locations:
                raise LocationError(
                    f"Location '{location.name}' not found",
                    name=location.name,
                )
            updated = dict(locations)
            updated[location.name] = location
            self._save(updated)
        self._logger.info(
            "GPS location updated",
            extra={"location": location.name, "campus": location.campus},
        )
        return location

    def clear_cache(self) -> None:
        """Drop cached metadata so the next read goes back to disk."""
        with self._lock:
            self._locations = None
        self._logger.debug("Location cache cleared")

    def _load(self) -> Dict[str, Location]:
        if self._locations is not None:
            return self._locations

        path = self.config.locations_path
        if not path.exists():
            self._locations = {}
            return self._locations

        try:
            records = read_json(path)
        except (OSError, ValueError) as e:
            raise LocationError(
                f"Failed to load GPS locations: {e}",
                file_path=str(path),
                cause=e,
            )
        if not isinstance(records, list):
            raise LocationError(
                "GPS locations file must contain a list",
                file_path=str(path),
            )

        locations: Dict[str, Location] = {}
        for record in records:
            try:
                location = Location.from_dict(record)
            except (KeyError, TypeError, ValueError) as e:
                self._logger.warning(
                    "Skipping invalid GPS record",
                    extra={"record": repr(record), "error": str(e)},
                )
                continue
            if location.name in locations:
                self._logger.warning(
                    "Duplicate GPS record, keeping the later one",
                    extra={"location": location.name},
                )
            locations[location.name] = location

        self._locations = locations
        self._logger.info(
            "GPS locations loaded",
            extra={"locations": len(locations), "locations_path": str(path)},
        )
        return self._locations

    def _save(self, locations: Dict[str, Location]) -> None:
        path = self.config.locations_path
        records: List[dict] = [loc.to_dict() for loc in locations.values()]
        try:
            write_json_atomic(path, records)
        except OSError as e:
            raise LocationError(
                f"Failed to save GPS locations: {e}",
                file_path=str(path),
                cause=e,
            )
        self._locations = locations
