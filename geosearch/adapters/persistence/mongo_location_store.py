from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from pymongo import GEO2D
from pymongo.collection import Collection
from pymongo.errors import ConnectionFailure, PyMongoError

from geosearch.adapters.mongo import MongoRuntimeConfig, mongo_collection
from geosearch.app.ports.output import ILocationStore
from geosearch.domain.exceptions import StoreQueryFailedError, StoreUnavailableError
from geosearch.domain.query import DEFAULT_POINT_FIELD

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MongoLocationStore(ILocationStore):
    """Locations stored in a MongoDB collection with a 2d index on the point field.

    Env vars:
      - MONGO_URI (default: mongodb://localhost:27017)
      - MONGO_DB (default: geosearch)
      - MONGO_COLLECTION (default: locations)
      - MONGO_TIMEOUT_MS (default: 5000)
      - MONGO_ENSURE_INDEX (default: true)
    """

    collection: Collection[Any] | None = None
    point_field: str = DEFAULT_POINT_FIELD

    _index_ready: bool = field(default=False, init=False, repr=False)
    # Split sub-queries call in from worker threads; setup must run once.
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False
    )

    def _collection(self) -> Collection[Any]:
        with self._lock:
            if self.collection is None:
                cfg = MongoRuntimeConfig.from_env()
                self.collection = mongo_collection(cfg)
                # Nothing to create when the caller opted out.
                self._index_ready = not cfg.ensure_index
            return self.collection

    def ensure_index(self) -> None:
        with self._lock:
            if self._index_ready:
                return
            col = self._collection()
            try:
                col.create_index([(self.point_field, GEO2D)])
            except ConnectionFailure as exc:
                raise StoreUnavailableError(f"MongoDB unreachable: {exc}") from exc
            except PyMongoError as exc:
                raise StoreQueryFailedError(
                    f"Could not create geo index: {exc}"
                ) from exc
            self._index_ready = True

    def find(self, query: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        col = self._collection()
        self.ensure_index()
        try:
            with col.find(dict(query)) as cursor:
                return list(cursor)
        except ConnectionFailure as exc:
            # ServerSelectionTimeoutError is a ConnectionFailure.
            raise StoreUnavailableError(f"MongoDB unreachable: {exc}") from exc
        except PyMongoError as exc:
            logger.error("MongoDB rejected query %s: %s", query, exc)
            raise StoreQueryFailedError(f"MongoDB query failed: {exc}") from exc

    def insert_many(self, documents: Iterable[Mapping[str, Any]]) -> int:
        docs = [dict(d) for d in documents]
        if not docs:
            return 0
        col = self._collection()
        self.ensure_index()
        try:
            result = col.insert_many(docs)
        except ConnectionFailure as exc:
            raise StoreUnavailableError(f"MongoDB unreachable: {exc}") from exc
        except PyMongoError as exc:
            raise StoreQueryFailedError(f"MongoDB insert failed: {exc}") from exc
        return len(result.inserted_ids)
