"""Location metadata port.

GPS coordinates and campus tags belong to the presentation side; the
graph never requires them. This protocol describes where they are kept.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Location


class LocationRepositoryPort(Protocol):
    """Port for GPS metadata storage.

    Implementation: adapters/locations/json_repository.py
    """

    def list_locations(self) -> Sequence[Location]:
        """Return every stored location, in file order."""
        ...

    def get_location(self, name: str) -> Optional[Location]:
        """Return the location for ``name``, or None if it has no metadata."""
        ...

    def add_location(self, location: Location) -> Location:
        """Store a new location.

        Raises:
            LocationError: If a location with the same name exists.
        """
        ...

    def update_location(self, location: Location) -> Location:
        """Replace the stored location with the same name.

        Raises:
            LocationError: If no location with that name exists.
        """
        ...
