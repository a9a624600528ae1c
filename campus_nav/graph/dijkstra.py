"""Shortest-path computation using Dijkstra's algorithm.

Runs over a read-only adjacency mapping (normally a ``GraphSnapshot``)
with a binary min-heap. Improved distances are pushed as new heap entries
and stale entries are skipped at pop time through the visited set.
Edge weights must be non-negative; ``GraphStore`` only admits positive
ones.
"""

import heapq
import itertools
import math
from typing import Dict, List, Mapping, Tuple

from ..domain.models import PathResult


def dijkstra(
    graph: Mapping[str, Mapping[str, float]], source: str
) -> Tuple[Dict[str, float], Dict[str, str]]:
    """Single-source shortest distances from ``source``.

    Parameters
    ----------
    graph:
        Adjacency mapping ``{node: {neighbor: weight}}``.
    source:
        Node to start from. Must be a key of ``graph``.

    Returns
    -------
    dict[str, float], dict[str, str]
        Tentative distances (``math.inf`` for unreachable nodes) and the
        predecessor of every reached node except ``source``.
    """
    distances: Dict[str, float] = {node: math.inf for node in graph}
    previous: Dict[str, str] = {}
    distances[source] = 0.0

    # counter keeps tuples comparable without comparing node names
    counter = itertools.count()
    heap: List[Tuple[float, int, str]] = [(0.0, next(counter), source)]
    visited = set()

    while heap:
        current_distance, _, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        for v, weight in graph[u].items():
            new_distance = current_distance + weight
            if new_distance < distances.get(v, math.inf):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, next(counter), v))

    return distances, previous


def reconstruct_path(previous: Mapping[str, str], source: str, target: str) -> List[str]:
    """Walk predecessors back from ``target`` and return the path in order."""
    path: List[str] = [target]
    current = target
    while current != source:
        current = previous[current]
        path.append(current)
    path.reverse()
    return path


def shortest_path(
    graph: Mapping[str, Mapping[str, float]], source: str, destination: str
) -> PathResult:
    """Compute the shortest path between two nodes.

    Unknown endpoints and unreachable destinations are reported through
    ``PathResult.status`` rather than raised.

    Parameters
    ----------
    graph:
        Adjacency mapping, typically ``GraphStore.snapshot()``.
    source:
        Name of the departure node.
    destination:
        Name of the arrival node.

    Returns
    -------
    PathResult
        ``FOUND`` with the node sequence (both endpoints included) and
        total distance, ``INVALID_ENDPOINT`` if either node is missing,
        or ``NO_PATH_FOUND`` if the destination cannot be reached.
    """
    if source not in graph or destination not in graph:
        return PathResult.invalid_endpoint()

    distances, previous = dijkstra(graph, source)

    if math.isinf(distances[destination]):
        return PathResult.no_path()

    path = reconstruct_path(previous, source, destination)
    return PathResult.found(tuple(path), distances[destination])
