"""Rendering adapters - Implementations of the MapRendererPort.

Available implementations:
- FoliumMapRenderer: Interactive HTML maps via Folium
"""

from .folium_adapter import FoliumMapRenderer

__all__ = ["FoliumMapRenderer"]
