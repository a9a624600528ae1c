"""In-memory weighted graph of campus locations.

``GraphStore`` owns the adjacency map ``{node: {neighbor: weight}}`` and
is the only thing allowed to mutate it. Every mutation either succeeds
completely or raises a domain error and leaves the map untouched:

- I1: every neighbor is itself a node
- I2: weight(a, b) == weight(b, a)
- I3: node names are unique
- I4: weights are finite and positive

Readers take a ``snapshot()``, which is deep-copied and read-only, so a
path query keeps seeing the same graph while mutations go on.
"""

from __future__ import annotations

import logging
import math
import threading
from numbers import Real
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from ..domain.errors import (
    DuplicateNodeError,
    GraphError,
    InvalidEdgeError,
    InvalidNodeNameError,
    InvalidWeightError,
    UnknownNodeError,
)
from ..domain.models import Edge

logger = logging.getLogger(__name__)

Adjacency = Dict[str, Dict[str, float]]


class GraphSnapshot(Mapping[str, Mapping[str, float]]):
    """Immutable point-in-time view of an adjacency map."""

    __slots__ = ("_data",)

    def __init__(self, adjacency: Mapping[str, Mapping[str, float]]):
        self._data: Mapping[str, Mapping[str, float]] = MappingProxyType(
            {node: MappingProxyType(dict(nbrs)) for node, nbrs in adjacency.items()}
        )

    def __getitem__(self, node: str) -> Mapping[str, float]:
        return self._data[node]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"GraphSnapshot(nodes={len(self)})"

    def to_dict(self) -> Adjacency:
        """Return a plain mutable copy."""
        return {node: dict(nbrs) for node, nbrs in self._data.items()}


def validate_weight(weight: object) -> float:
    """Return ``weight`` as a float or raise InvalidWeightError."""
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeightError(
            f"Weight must be a number, got {weight!r}", weight=weight
        )
    try:
        value = float(weight)
    except OverflowError as e:
        raise InvalidWeightError(
            "Weight is too large to be a finite number", weight=weight, cause=e
        )
    if not math.isfinite(value) or value <= 0:
        raise InvalidWeightError(
            f"Weight must be a finite positive number, got {weight!r}",
            weight=weight,
        )
    return value


def _validate_name(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidNodeNameError(
            f"Node name must be a non-empty string, got {name!r}", name=name
        )
    return name


class GraphStore:
    """Owner of the weighted, undirected campus graph.

    Example:
        store = GraphStore()
        store.add_node("Library")
        store.add_node("Canteen")
        store.add_or_update_edge("Library", "Canteen", 120)
        snapshot = store.snapshot()
    """

    def __init__(self) -> None:
        self._adj: Adjacency = {}
        self._lock = threading.RLock()

    @classmethod
    def from_adjacency(cls, data: Mapping[str, Mapping[str, object]]) -> GraphStore:
        """Build a store from a loaded snapshot, checking every invariant.

        A missing reverse direction is filled in; a reverse direction
        with a different weight is rejected.

        Raises:
            GraphError: If the snapshot violates I1-I4.
        """
        if not isinstance(data, Mapping):
            raise GraphError(f"Graph snapshot must be a mapping, got {type(data).__name__}")

        store = cls()
        try:
            for name, nbrs in data.items():
                store._adj[_validate_name(name)] = {}
                if not isinstance(nbrs, Mapping):
                    raise GraphError(f"Adjacency of {name!r} must be a mapping")

            for name, nbrs in data.items():
                for nbr, raw_weight in nbrs.items():
                    if nbr not in store._adj:
                        raise GraphError(f"Edge {name!r} -> {nbr!r} references an unknown node")
                    if nbr == name:
                        raise GraphError(f"Self-loop on {name!r}")
                    weight = validate_weight(raw_weight)
                    existing = store._adj[nbr].get(name)
                    if existing is not None and existing != weight:
                        raise GraphError(
                            f"Asymmetric weights between {name!r} and {nbr!r}: "
                            f"{weight} != {existing}"
                        )
                    store._adj[name][nbr] = weight
                    store._adj[nbr][name] = weight
        except (InvalidNodeNameError, InvalidWeightError) as e:
            raise GraphError(f"Invalid graph snapshot: {e.message}", cause=e)

        logger.debug(
            "Graph store built from snapshot",
            extra={"nodes": store.node_count, "edges": store.edge_count},
        )
        return store

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add_node(self, name: str) -> None:
        """Create ``name`` with no edges.

        Raises:
            DuplicateNodeError: If the node already exists.
            InvalidNodeNameError: If the name is empty or not a string.
        """
        _validate_name(name)
        with self._lock:
            if name in self._adj:
                raise DuplicateNodeError(f"Location '{name}' already exists", name=name)
            self._adj[name] = {}
        logger.info("Node added", extra={"node": name})

    def add_or_update_edge(self, source: str, target: str, weight: float) -> None:
        """Set weight(source, target) = weight(target, source) = weight.

        An existing edge between the pair is overwritten, not summed.

        Raises:
            UnknownNodeError: If either endpoint is absent.
            InvalidEdgeError: If source and target are the same node.
            InvalidWeightError: If weight is not a finite positive number.
        """
        with self._lock:
            for name in (source, target):
                if name not in self._adj:
                    raise UnknownNodeError(f"Location '{name}' does not exist", name=name)
            if source == target:
                raise InvalidEdgeError(
                    f"Cannot connect '{source}' to itself", source=source, target=target
                )
            value = validate_weight(weight)
            self._adj[source][target] = value
            self._adj[target][source] = value
        logger.info(
            "Edge set",
            extra={"source": source, "target": target, "weight": value},
        )

    def remove_edge(self, source: str, target: str) -> bool:
        """Remove the edge between source and target in both directions.

        Removing an absent edge, or naming an unknown node, is a no-op.

        Returns:
            True if an edge was removed.
        """
        with self._lock:
            removed = self._adj.get(source, {}).pop(target, None) is not None
            removed = self._adj.get(target, {}).pop(source, None) is not None or removed
        if removed:
            logger.info("Edge removed", extra={"source": source, "target": target})
        return removed

    def delete_node(self, name: str) -> None:
        """Remove ``name`` and every edge incident to it.

        Raises:
            UnknownNodeError: If the node does not exist.
        """
        with self._lock:
            if name not in self._adj:
                raise UnknownNodeError(f"Location '{name}' does not exist", name=name)
            for nbr in self._adj[name]:
                self._adj[nbr].pop(name, None)
            del self._adj[name]
        logger.info("Node deleted", extra={"node": name})

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def snapshot(self) -> GraphSnapshot:
        """Return an immutable copy of the current adjacency map."""
        with self._lock:
            return GraphSnapshot(self._adj)

    def to_dict(self) -> Adjacency:
        """Return a plain copy suitable for JSON persistence."""
        with self._lock:
            return {node: dict(nbrs) for node, nbrs in self._adj.items()}

    def has_node(self, name: str) -> bool:
        return name in self._adj

    def has_edge(self, source: str, target: str) -> bool:
        return target in self._adj.get(source, {})

    def weight(self, source: str, target: str) -> Optional[float]:
        """Return the edge weight, or None if there is no such edge."""
        return self._adj.get(source, {}).get(target)

    def neighbors(self, name: str) -> Dict[str, float]:
        """Return a copy of the adjacency of ``name``.

        Raises:
            UnknownNodeError: If the node does not exist.
        """
        with self._lock:
            if name not in self._adj:
                raise UnknownNodeError(f"Location '{name}' does not exist", name=name)
            return dict(self._adj[name])

    def nodes(self) -> List[str]:
        with self._lock:
            return list(self._adj)

    def edges(self) -> List[Edge]:
        """Each undirected edge once, in first-seen order."""
        with self._lock:
            seen = set()
            result: List[Edge] = []
            for u, nbrs in self._adj.items():
                for v, w in nbrs.items():
                    key = frozenset((u, v))
                    if key in seen:
                        continue
                    seen.add(key)
                    result.append(Edge(source=u, target=v, weight=w))
            return result

    @property
    def node_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        with self._lock:
            return sum(len(nbrs) for nbrs in self._adj.values()) // 2

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, name: object) -> bool:
        return name in self._adj

    def __repr__(self) -> str:
        return f"GraphStore(nodes={self.node_count}, edges={self.edge_count})"
