from __future__ import annotations

import os

import pytest
from pymongo import MongoClient
from pymongo.errors import PyMongoError


def _mongo_healthy(uri: str) -> bool:
    client: MongoClient = MongoClient(uri, serverSelectionTimeoutMS=1500)
    try:
        client.admin.command("ping")
        return True
    except PyMongoError:
        return False
    finally:
        client.close()


@pytest.fixture(scope="session", autouse=True)
def mongo_env() -> None:
    """Set sane defaults so the adapters talk to a local MongoDB in integration tests."""

    os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
    os.environ.setdefault("MONGO_DB", "geosearch_test")
    os.environ.setdefault("MONGO_TIMEOUT_MS", "2000")


@pytest.fixture(scope="session")
def require_mongo(mongo_env: None) -> str:
    uri = os.environ["MONGO_URI"]
    if not _mongo_healthy(uri):
        msg = f"MongoDB not reachable at {uri}"

        # In CI we want this to be a hard failure, because the workflow is
        # expected to start MongoDB.
        if os.getenv("CI") or os.getenv("GITHUB_ACTIONS") or os.getenv("REQUIRE_MONGO"):
            pytest.fail(msg, pytrace=False)

        pytest.skip(f"{msg}; skipping integration tests")
    return uri
