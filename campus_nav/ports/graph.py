"""Graph ports - Abstractions for graph persistence and routing.

These protocols define the contracts for graph operations: loading and
saving the whole-graph snapshot, and computing shortest paths over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Mapping, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult

# Maps node name -> {neighbor name: distance}
Graph = Mapping[str, Mapping[str, float]]


class GraphRepositoryPort(Protocol):
    """Port for loading and saving the graph snapshot.

    Implementation: adapters/graph/json_repository.py

    The repository is loaded once before serving and saved after every
    successful mutation.
    """

    def load(self) -> Dict[str, Dict[str, float]]:
        """Load the whole graph.

        Returns:
            The adjacency map; empty if nothing was stored yet.
        """
        ...

    def save(self, graph: Graph) -> None:
        """Persist the whole graph, replacing the previous snapshot.

        Args:
            graph: The adjacency map to store.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py (shortest_path)
    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        graph: Graph,
        source: str,
        destination: str,
    ) -> PathResult:
        """Find the shortest path between two nodes.

        Args:
            graph: Read-only graph snapshot.
            source: Departure node name.
            destination: Arrival node name.

        Returns:
            PathResult with the path and distance, or the reason none exists.
        """
        ...
