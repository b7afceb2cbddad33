"""
Geohash encoding

A geohash bisects the longitude and latitude ranges in turn, one bit per
step starting with longitude, and packs every 5 bits into one character of
a base-32 alphabet. Locations that share a prefix share a cell, which is
what proximity bucketing relies on.
"""

import math

from .errors import InvalidCoordinate, InvalidGeohash
from .models import Coordinates, GeohashBounds

# Standard base-32 alphabet for geohashing (no a, i, l, o)
GEOHASH_BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
DEFAULT_PRECISION = 9


def encode_geohash(latitude: float, longitude: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Encode coordinates into a geohash string.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        precision: Number of characters in the resulting hash

    Returns:
        Geohash of exactly `precision` characters

    Raises:
        InvalidCoordinate: if latitude or longitude is NaN or infinite
    """
    if not math.isfinite(latitude) or not math.isfinite(longitude):
        raise InvalidCoordinate(latitude, longitude)
    if precision < 1:
        raise ValueError(f"Geohash precision must be at least 1 (got {precision})")

    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]

    geohash = []
    bit = 0
    ch = 0
    even_bit = True

    while len(geohash) < precision:
        if even_bit:
            # Longitude
            mid = (lon_range[0] + lon_range[1]) / 2
            if longitude >= mid:
                ch = (ch << 1) | 1
                lon_range[0] = mid
            else:
                ch = ch << 1
                lon_range[1] = mid
        else:
            # Latitude
            mid = (lat_range[0] + lat_range[1]) / 2
            if latitude >= mid:
                ch = (ch << 1) | 1
                lat_range[0] = mid
            else:
                ch = ch << 1
                lat_range[1] = mid

        even_bit = not even_bit
        bit += 1

        if bit == 5:
            geohash.append(GEOHASH_BASE32[ch])
            bit = 0
            ch = 0

    return "".join(geohash)


def decode_geohash(geohash: str) -> GeohashBounds:
    """Decode a geohash into the bounds of its cell"""
    geohash = geohash.strip().lower()
    if not geohash:
        raise InvalidGeohash("Geohash must not be empty")

    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]
    even_bit = True

    for char in geohash:
        idx = GEOHASH_BASE32.find(char)
        if idx == -1:
            raise InvalidGeohash(f"Invalid geohash character {char!r} in {geohash!r}")

        for shift in range(4, -1, -1):
            bit_set = (idx >> shift) & 1
            rng = lon_range if even_bit else lat_range
            mid = (rng[0] + rng[1]) / 2
            if bit_set:
                rng[0] = mid
            else:
                rng[1] = mid
            even_bit = not even_bit

    return GeohashBounds(
        geohash=geohash,
        min_latitude=lat_range[0],
        max_latitude=lat_range[1],
        min_longitude=lon_range[0],
        max_longitude=lon_range[1],
        center=Coordinates(
            latitude=(lat_range[0] + lat_range[1]) / 2,
            longitude=(lon_range[0] + lon_range[1]) / 2,
        ),
    )
