from .geo import GeoSearchError


class StoreError(GeoSearchError):
    """Base exception for failures raised by the location store."""


class StoreUnavailableError(StoreError):
    """Raised when the store cannot be reached."""


class StoreQueryFailedError(StoreError):
    """Raised when the store rejects or fails to execute a query."""
