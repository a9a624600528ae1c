"""Services layer - Application orchestration.

Available services:
- CampusNavigatorService: Graph editing, persistence and path finding
"""

from .navigator import CampusNavigatorService

__all__ = ["CampusNavigatorService"]
