"""Geocoding service package"""

from .errors import InvalidCoordinate, InvalidGeohash
from .geohash import GEOHASH_BASE32, decode_geohash, encode_geohash
from .models import Coordinates, GeocodeInput, GeocodeResult, GeohashBounds, SessionLocation
from .service import GeocodingService, build_query, geocode, resolve_location

__all__ = [
    "Coordinates",
    "GeocodeInput",
    "GeocodeResult",
    "GeohashBounds",
    "SessionLocation",
    "InvalidCoordinate",
    "InvalidGeohash",
    "GEOHASH_BASE32",
    "encode_geohash",
    "decode_geohash",
    "build_query",
    "geocode",
    "resolve_location",
    "GeocodingService",
]
