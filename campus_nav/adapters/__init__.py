"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Graph storage (JSON file)
- GPS metadata storage (JSON file)
- Rendering engines (Folium)
"""
