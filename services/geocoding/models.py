"""Pydantic models for geocoding"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Coordinates(BaseModel):
    """Geographic coordinates"""

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")

    @field_validator("latitude", "longitude")
    @classmethod
    def round_precision(cls, v: float) -> float:
        """Round to 6 decimal places (~11cm precision)"""
        return round(v, 6)


class GeocodeInput(BaseModel):
    """Raw address fields as entered on a profile or a session form"""

    model_config = ConfigDict(populate_by_name=True)

    address: str | None = None
    address_complement: str | None = Field(None, alias="addressComplement")
    zip_code: str | None = Field(None, alias="zipCode")


class GeocodeResult(BaseModel):
    """Deterministic geocoding result"""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    normalized_address: str


class SessionLocation(BaseModel):
    """Everything a caller persists for a located meetup"""

    coordinates: Coordinates
    geohash: str
    normalized_address: str


class GeohashBounds(BaseModel):
    """Bounding box of a geohash cell"""

    geohash: str
    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float
    center: Coordinates
