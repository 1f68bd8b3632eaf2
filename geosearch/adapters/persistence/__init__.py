from .in_memory_location_store import InMemoryLocationStore
from .mongo_location_store import MongoLocationStore

__all__ = [
    "InMemoryLocationStore",
    "MongoLocationStore",
]
