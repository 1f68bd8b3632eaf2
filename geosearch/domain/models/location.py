from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Location:
    """A stored place: its point (absent if the stored one was unreadable) and description."""

    point: GeoPoint | None
    description: str | None = None
