"""Graph engine for the campus navigator.

This subpackage holds the in-memory weighted graph (``GraphStore``) and
the Dijkstra shortest-path routines that run on its snapshots.
"""

from .dijkstra import dijkstra, reconstruct_path, shortest_path
from .store import Adjacency, GraphSnapshot, GraphStore, validate_weight

__all__ = [
    "Adjacency",
    "GraphSnapshot",
    "GraphStore",
    "dijkstra",
    "reconstruct_path",
    "shortest_path",
    "validate_weight",
]
