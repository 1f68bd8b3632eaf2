from __future__ import annotations

from enum import Enum


class GeoSearchError(Exception):
    """Base exception for bounding-box search failures."""


class OutOfRangeError(GeoSearchError, ValueError):
    """Raised when a latitude or longitude lies outside its legal range."""


class InvalidBoxReason(str, Enum):
    NULL_CORNER = "null_corner"
    DEGENERATE_SINGLE_POINT = "degenerate_single_point"
    SAME_LATITUDE_OR_LONGITUDE = "same_latitude_or_longitude"
    BOTH_CORNERS_ZERO = "both_corners_zero"


class InvalidBoxError(GeoSearchError, ValueError):
    """Raised when two corners do not describe a usable bounding box."""

    def __init__(self, reason: InvalidBoxReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason


class MalformedDocumentError(GeoSearchError):
    """Raised when a stored document has a missing or unreadable geo field.

    The description is kept so callers can still emit the location without
    its point.
    """

    def __init__(self, message: str, *, description: str | None = None) -> None:
        super().__init__(message)
        self.description = description
