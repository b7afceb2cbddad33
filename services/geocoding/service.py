"""Deterministic geocoding service (no external provider)"""

import hashlib
import logging

from core.config import settings

from .geohash import encode_geohash
from .models import Coordinates, GeocodeInput, GeocodeResult, SessionLocation

logger = logging.getLogger(__name__)

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
MAX_UINT32 = 0xFFFFFFFF


def _sanitize_part(value: str | None) -> str:
    return value.strip() if value else ""


def build_query(data: GeocodeInput) -> str:
    """Join the non-empty address parts as 'address, complement, zip'"""
    parts = [
        _sanitize_part(part)
        for part in (data.address, data.address_complement, data.zip_code)
    ]
    return ", ".join(part for part in parts if part)


def _deterministic_coordinate(digest: bytes, offset: int, bounds: tuple[float, float]) -> float:
    """Map 4 digest bytes (big-endian uint32) linearly into bounds"""
    fraction = int.from_bytes(digest[offset:offset + 4], "big") / MAX_UINT32
    low, high = bounds
    return round(low + fraction * (high - low), 6)


def geocode(data: GeocodeInput) -> GeocodeResult | None:
    """
    Derive stable coordinates for an address.

    The lower-cased query is hashed with SHA-256; bytes 0-3 give the latitude
    and bytes 4-7 the longitude. The same address always lands on the same
    point, whatever its casing.

    Returns:
        GeocodeResult, or None when no address part was supplied
    """
    query = build_query(data)
    if not query:
        return None

    digest = hashlib.sha256(query.lower().encode("utf-8")).digest()
    latitude = _deterministic_coordinate(digest, 0, LATITUDE_RANGE)
    longitude = _deterministic_coordinate(digest, 4, LONGITUDE_RANGE)

    logger.debug(f"Geocoded {query!r} -> ({latitude}, {longitude})")

    return GeocodeResult(
        latitude=latitude,
        longitude=longitude,
        normalized_address=query,
    )


def resolve_location(
    data: GeocodeInput,
    known: Coordinates | None = None,
    precision: int = 9,
) -> SessionLocation | None:
    """
    Resolve where a meetup takes place.

    Coordinates already stored for the address (e.g. on the host's profile)
    win over a fresh derivation. Returns None when no address part was
    supplied, known coordinates or not.
    """
    if known is not None:
        query = build_query(data)
        if not query:
            return None
        coordinates = known
    else:
        result = geocode(data)
        if result is None:
            return None
        query = result.normalized_address
        coordinates = Coordinates(latitude=result.latitude, longitude=result.longitude)

    return SessionLocation(
        coordinates=coordinates,
        geohash=encode_geohash(coordinates.latitude, coordinates.longitude, precision),
        normalized_address=query,
    )


class GeocodingService:
    """
    Stateless geocoding facade with a configured geohash precision
    """

    def __init__(self, precision: int | None = None):
        """
        Initialize geocoding service

        Args:
            precision: Default geohash length (or set GEOHASH_PRECISION env var)
        """
        self.precision = precision or settings.GEOHASH_PRECISION
        self.provider = "deterministic"

    def geocode(self, data: GeocodeInput) -> GeocodeResult | None:
        return geocode(data)

    def encode_geohash(self, latitude: float, longitude: float, precision: int | None = None) -> str:
        return encode_geohash(latitude, longitude, precision or self.precision)

    def resolve_location(
        self,
        data: GeocodeInput,
        known: Coordinates | None = None,
        precision: int | None = None,
    ) -> SessionLocation | None:
        return resolve_location(data, known=known, precision=precision or self.precision)
