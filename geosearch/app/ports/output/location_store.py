from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping


class ILocationStore(ABC):
    """Port for the geo-indexed document store holding locations.

    Documents keep the point as a ``[lon, lat]`` array. Implementations raise
    ``StoreUnavailableError`` / ``StoreQueryFailedError`` on failure.
    """

    @abstractmethod
    def find(self, query: Mapping[str, Any]) -> Iterable[Mapping[str, Any]]:
        """Return the raw documents matching a MongoDB-style query document."""

    @abstractmethod
    def insert_many(self, documents: Iterable[Mapping[str, Any]]) -> int:
        """Store raw documents and return how many were inserted."""
