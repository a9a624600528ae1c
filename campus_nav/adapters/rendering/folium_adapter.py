"""Folium map renderer adapter.

Draws the campus graph on an interactive Folium map:
- every location with coordinates as a marker
- every edge whose endpoints both have coordinates as a grey line
- the selected path highlighted, with green source and red destination
- other markers coloured by campus

Nodes without GPS metadata are left off the map.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Optional, Sequence, Set

from ...config import MapConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import Location
from ...ports.graph import Graph


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    This adapter implements MapRendererPort.

    Attributes:
        config: Map configuration (tiles, zoom, colours)
    """

    config: MapConfig = field(default_factory=lambda: get_config().map)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render_html(
        self,
        locations: Sequence[Location],
        graph: Graph,
        path: Optional[Sequence[str]] = None,
    ) -> str:
        """Render the map as a standalone HTML document.

        Raises:
            RenderingError: If rendering fails.
        """
        try:
            m = self._build_map(locations, graph, path or ())
            return m.get_root().render()
        except RenderingError:
            raise
        except Exception as e:
            self._logger.error("Map rendering failed", extra={"error": str(e)})
            raise RenderingError(
                f"Map rendering failed: {e}",
                renderer_type="folium",
                cause=e,
            )

    def render(
        self,
        locations: Sequence[Location],
        graph: Graph,
        output_path: Path,
        path: Optional[Sequence[str]] = None,
    ) -> Path:
        """Render the map and save it to file.

        Returns:
            Path to the generated map file.

        Raises:
            RenderingError: If rendering or saving fails.
        """
        self._logger.info(
            "Rendering campus map",
            extra={
                "locations": len(locations),
                "path_length": len(path or ()),
                "output_path": str(output_path),
            },
        )

        try:
            m = self._build_map(locations, graph, path or ())
            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        self._logger.info(
            "Map rendered successfully",
            extra={"output_path": str(output_path)},
        )
        return output_path

    def _build_map(
        self,
        locations: Sequence[Location],
        graph: Graph,
        path: Sequence[str],
    ):
        import folium

        coords: Dict[str, Location] = {loc.name: loc for loc in locations}

        if coords:
            lats = [loc.location.latitude for loc in coords.values()]
            lons = [loc.location.longitude for loc in coords.values()]
            center = [sum(lats) / len(lats), sum(lons) / len(lons)]
        else:
            center = list(self.config.default_center)

        m = folium.Map(
            location=center,
            zoom_start=self.config.zoom_start,
            tiles=self.config.tiles,
            control_scale=True,
        )

        path_edges: Set[FrozenSet[str]] = {
            frozenset(pair) for pair in zip(path, path[1:])
        }

        drawn: Set[FrozenSet[str]] = set()
        for u, nbrs in graph.items():
            for v, weight in nbrs.items():
                key = frozenset((u, v))
                if key in drawn or key in path_edges:
                    continue
                drawn.add(key)
                if u not in coords or v not in coords:
                    continue
                folium.PolyLine(
                    [_latlng(coords[u]), _latlng(coords[v])],
                    color=self.config.edge_color,
                    weight=2,
                    opacity=0.6,
                    tooltip=f"{u} - {v}: {weight:g} m",
                ).add_to(m)

        route = [_latlng(coords[name]) for name in path if name in coords]
        if len(route) >= 2:
            folium.PolyLine(
                route,
                color=self.config.path_color,
                weight=5,
                opacity=0.9,
            ).add_to(m)

        endpoints = (path[0], path[-1]) if path else (None, None)
        for name, loc in coords.items():
            if name == endpoints[0]:
                icon_color = "green"
            elif name == endpoints[1]:
                icon_color = "red"
            elif name in path:
                icon_color = "orange"
            else:
                icon_color = self.config.campus_colors.get(
                    loc.campus, self.config.marker_color
                )
            popup = f"{name} ({loc.campus})" if loc.campus else name
            folium.Marker(
                location=_latlng(loc),
                popup=popup,
                tooltip=name,
                icon=folium.Icon(color=icon_color),
            ).add_to(m)

        if len(route) >= 2:
            m.fit_bounds(route)

        return m


def _latlng(loc: Location) -> list:
    return [loc.location.latitude, loc.location.longitude]
