from .geo import (
    GeoSearchError,
    InvalidBoxError,
    InvalidBoxReason,
    MalformedDocumentError,
    OutOfRangeError,
)
from .store import StoreError, StoreQueryFailedError, StoreUnavailableError

__all__ = [
    "GeoSearchError",
    "InvalidBoxError",
    "InvalidBoxReason",
    "MalformedDocumentError",
    "OutOfRangeError",
    "StoreError",
    "StoreQueryFailedError",
    "StoreUnavailableError",
]
