from .location_store import ILocationStore

__all__ = [
    "ILocationStore",
]
