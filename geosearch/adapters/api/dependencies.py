from __future__ import annotations

import os
from functools import lru_cache

from geosearch.adapters.persistence.in_memory_location_store import (
    InMemoryLocationStore,
)
from geosearch.adapters.persistence.mongo_location_store import MongoLocationStore
from geosearch.app.ports.output import ILocationStore
from geosearch.app.services.geo_search_service import GeoSearchService


@lru_cache(maxsize=1)
def get_location_store() -> ILocationStore:
    # Without MONGO_URI the process keeps its locations in memory.
    if os.getenv("MONGO_URI"):
        return MongoLocationStore()
    return InMemoryLocationStore()


def get_geo_search_service() -> GeoSearchService:
    service = GeoSearchService(store=get_location_store())

    # Allow tuning via env without changing code.
    raw = os.getenv("GEOSEARCH_PARALLEL_QUERIES")
    if raw is not None:
        service.parallel_queries = raw.strip().lower() not in {"0", "false", "no"}

    return service
