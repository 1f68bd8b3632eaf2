from .bbox import ANTIMERIDIAN_LON, GeoBoundingBox
from .geo import GeoPoint
from .location import Location

__all__ = [
    "ANTIMERIDIAN_LON",
    "GeoBoundingBox",
    "GeoPoint",
    "Location",
]
