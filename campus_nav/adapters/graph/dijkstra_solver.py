"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds logging of each query
and its outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import PathResult, PathStatus
from ...graph.dijkstra import shortest_path
from ...ports.graph import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. It never raises for bad
    input; unknown endpoints and unreachable destinations come back as
    a PathResult status.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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
            PathResult with path and distance, or an empty path and reason.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination},
        )

        result = shortest_path(graph, source, destination)

        if result.status is PathStatus.INVALID_ENDPOINT:
            self._logger.warning(
                "Route requested for unknown location",
                extra={"source": source, "destination": destination},
            )
        elif result.status is PathStatus.NO_PATH_FOUND:
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
        else:
            self._logger.info(
                "Route found",
                extra={
                    "source": source,
                    "destination": destination,
                    "stops": result.num_stops,
                    "distance": result.distance,
                },
            )

        return result
