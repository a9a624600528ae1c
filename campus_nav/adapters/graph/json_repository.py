"""JSON Graph Repository adapter.

Stores the whole graph as one JSON object ``{node: {neighbor: weight}}``
and adds:
- Configuration injection (path from config)
- Atomic saves
- Typed errors for unreadable or malformed files
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...ports.graph import Graph
from ..json_io import read_json, write_json_atomic


@dataclass
class JSONGraphRepository:
    """Graph repository backed by a single JSON file.

    This adapter implements GraphRepositoryPort. A missing file is an
    empty graph, so a fresh deployment starts without any setup.

    Attributes:
        config: Graph configuration (data dir, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Dict[str, Dict[str, float]]:
        """Load the graph snapshot from disk.

        Returns:
            The adjacency map, or ``{}`` when the file does not exist.

        Raises:
            GraphError: If the file cannot be read or is not a graph.
        """
        path = self.config.graph_path
        if not path.exists():
            self._logger.info(
                "Graph file not found, starting empty",
                extra={"graph_path": str(path)},
            )
            return {}

        try:
            data = read_json(path)
        except (OSError, ValueError) as e:
            raise GraphError(
                f"Failed to load graph: {e}",
                file_path=str(path),
                cause=e,
            )

        if not isinstance(data, dict) or not all(
            isinstance(nbrs, dict) for nbrs in data.values()
        ):
            raise GraphError(
                "Graph file must contain an object of objects",
                file_path=str(path),
            )

        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(data), "graph_path": str(path)},
        )
        return data

    def save(self, graph: Graph) -> None:
        """Write the graph snapshot to disk.

        Raises:
            GraphError: If the file cannot be written.
        """
        path = self.config.graph_path
        payload = {node: dict(nbrs) for node, nbrs in graph.items()}
        try:
            write_json_atomic(path, payload)
        except (OSError, TypeError, ValueError) as e:
            raise GraphError(
                f"Failed to save graph: {e}",
                file_path=str(path),
                cause=e,
            )
        self._logger.debug(
            "Graph saved",
            extra={"nodes": len(payload), "graph_path": str(path)},
        )
