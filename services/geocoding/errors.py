"""Exceptions for geocoding operations."""


class InvalidCoordinate(ValueError):
    """Raised when a latitude or longitude is not a finite number."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"Latitude and longitude must be finite numbers (got {latitude!r}, {longitude!r})"
        )


class InvalidGeohash(ValueError):
    """Raised when a geohash string cannot be decoded."""
