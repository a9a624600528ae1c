"""Location adapters - Implementations of the LocationRepositoryPort.

Available implementations:
- JSONLocationRepository: GPS metadata stored as a JSON array
"""

from .json_repository import JSONLocationRepository

__all__ = ["JSONLocationRepository"]
