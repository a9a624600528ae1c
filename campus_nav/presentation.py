"""Text formatting for the admin and path-finder UI.

Turns service outcomes and domain errors into the short messages shown
to users. Nothing here raises for a domain error.
"""

from __future__ import annotations

import html
import logging
from typing import Callable, Optional, Sequence

from .domain.errors import CampusNavError
from .domain.models import Location, PathResult, PathStatus

logger = logging.getLogger(__name__)


def format_distance(meters: float) -> str:
    if meters >= 1000:
        return f"{meters / 1000:.2f} km"
    return f"{meters:g} m"


def format_path_result(result: PathResult, source: str = "", destination: str = "") -> str:
    """Markdown summary of a path query."""
    if result.status is PathStatus.INVALID_ENDPOINT:
        return f"**Invalid nodes**: '{source}' or '{destination}' is not a known location."
    if result.status is PathStatus.NO_PATH_FOUND or result.distance is None:
        return f"**No Path Found** between '{source}' and '{destination}'."

    route = " → ".join(result.path)
    return (
        f"**Shortest path**: {route}\n\n"
        f"**Total distance**: {format_distance(result.distance)} "
        f"({result.num_stops} stops)"
    )


def format_error(error: CampusNavError) -> str:
    return f"Error ({error.code}): {error.message}"


def run_action(action: Callable[[], object], success_message: str) -> str:
    """Run a mutation and return the message to display.

    Domain errors become an error message; anything else propagates.
    """
    try:
        action()
    except CampusNavError as e:
        logger.warning("Action rejected", extra={"code": e.code, "error": e.message})
        return format_error(e)
    return success_message


def locations_table(locations: Sequence[Location]) -> list[list[object]]:
    """Rows of ``[name, lat, lng, campus]`` for a table widget."""
    return [
        [loc.name, loc.location.latitude, loc.location.longitude, loc.campus]
        for loc in locations
    ]


def map_iframe(document_html: str, *, height_px: int = 520) -> str:
    escaped = html.escape(document_html, quote=True)
    return (
        f'<iframe srcdoc="{escaped}" '
        f'style="width: 100%; height: {height_px}px; border: 0;" '
        f'loading="lazy"></iframe>'
    )


def estimate_message(source: str, target: str, meters: Optional[float]) -> str:
    if meters is None:
        return f"No GPS coordinates for '{source}' or '{target}'."
    return f"Straight-line distance {source} ↔ {target}: {format_distance(meters)}"
