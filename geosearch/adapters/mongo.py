from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class MongoRuntimeConfig:
    uri: str | None
    database: str
    collection: str
    timeout_ms: int
    ensure_index: bool

    @staticmethod
    def from_env() -> "MongoRuntimeConfig":
        uri = os.getenv("MONGO_URI")
        if uri is not None:
            uri = uri.strip() or None

        return MongoRuntimeConfig(
            uri=uri,
            database=os.getenv("MONGO_DB", "geosearch"),
            collection=os.getenv("MONGO_COLLECTION", "locations"),
            timeout_ms=int(os.getenv("MONGO_TIMEOUT_MS", "5000")),
            ensure_index=_env_bool("MONGO_ENSURE_INDEX", True),
        )

    def resolved_uri(self) -> str:
        """Return the connection string to use.

        Priority:
          1) MONGO_URI
          2) mongodb://localhost:27017 (local development)
        """

        return self.uri or "mongodb://localhost:27017"


def mongo_client(cfg: MongoRuntimeConfig | None = None) -> MongoClient[Any]:
    cfg = cfg or MongoRuntimeConfig.from_env()
    return MongoClient(
        cfg.resolved_uri(),
        serverSelectionTimeoutMS=cfg.timeout_ms,
        connectTimeoutMS=cfg.timeout_ms,
    )


def mongo_collection(cfg: MongoRuntimeConfig | None = None) -> Collection[Any]:
    cfg = cfg or MongoRuntimeConfig.from_env()
    return mongo_client(cfg)[cfg.database][cfg.collection]
