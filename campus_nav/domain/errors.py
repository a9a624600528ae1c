"""Typed domain errors for the Campus Navigator.

Every rejected operation surfaces as one of these errors instead of
leaving the graph half-updated. All errors inherit from CampusNavError,
carry a stable ``code`` for the UI layer, and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Optional


@dataclass
class CampusNavError(Exception):
    """Base error for the campus navigation domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    code: ClassVar[str] = "CampusNavError"

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, str]:
        """Return the error as a JSON-ready outcome."""
        return {"error": self.code, "message": str(self)}


@dataclass
class DuplicateNodeError(CampusNavError):
    """Attempted to create a node that already exists.

    Attributes:
        name: The node name that is already present
    """

    code: ClassVar[str] = "DuplicateNode"

    name: str = ""


@dataclass
class UnknownNodeError(CampusNavError):
    """Referenced node is absent from the graph.

    Attributes:
        name: The node name that was not found
    """

    code: ClassVar[str] = "UnknownNode"

    name: str = ""


@dataclass
class InvalidWeightError(CampusNavError):
    """Edge weight is not a finite positive number.

    Attributes:
        weight: The rejected value, as given by the caller
    """

    code: ClassVar[str] = "InvalidWeight"

    weight: object = None


@dataclass
class InvalidEdgeError(CampusNavError):
    """Edge endpoints are not a pair of distinct nodes (self-loop)."""

    code: ClassVar[str] = "InvalidEdge"

    source: str = ""
    target: str = ""


@dataclass
class InvalidNodeNameError(CampusNavError):
    """Node name is empty or not a string."""

    code: ClassVar[str] = "InvalidNodeName"

    name: object = None


@dataclass
class GraphError(CampusNavError):
    """Graph loading, saving or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    code: ClassVar[str] = "GraphError"

    file_path: Optional[str] = None


@dataclass
class LocationError(CampusNavError):
    """GPS metadata could not be added, updated or loaded.

    Attributes:
        name: The location name involved
        file_path: Path to the metadata file if relevant
    """

    code: ClassVar[str] = "LocationError"

    name: str = ""
    file_path: Optional[str] = None


@dataclass
class RenderingError(CampusNavError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    code: ClassVar[str] = "RenderingError"

    output_path: Optional[str] = None
    renderer_type: str = ""
