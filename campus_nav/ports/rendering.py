"""Rendering port - Abstraction for map generation.

This protocol defines the contract for map rendering, allowing
different implementations to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Location
    from .graph import Graph


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py

    Map renderers draw the campus graph and highlight a path on an
    interactive map.
    """

    def render_html(
        self,
        locations: Sequence[Location],
        graph: Graph,
        path: Optional[Sequence[str]] = None,
    ) -> str:
        """Render the map and return it as a standalone HTML document."""
        ...

    def render(
        self,
        locations: Sequence[Location],
        graph: Graph,
        output_path: Path,
        path: Optional[Sequence[str]] = None,
    ) -> Path:
        """Render the map and save it to ``output_path``.

        Returns:
            Path to the generated map file.
        """
        ...
