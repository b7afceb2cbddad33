"""Geocoding endpoints for the board game meetup backend"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel, Field

from api.dependencies import limiter
from core.config import settings
from services.geocoding import (
    Coordinates,
    GeocodeInput,
    GeocodeResult,
    GeocodingService,
    GeohashBounds,
    InvalidGeohash,
    SessionLocation,
    decode_geohash,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/geocoding", tags=["geocoding"])

EMPTY_ADDRESS_DETAIL = "Unable to calculate coordinates for this address"
MAX_GEOHASH_PRECISION = 20

# Global geocoding service (created on first use)
_geocoding_service = None


def get_geocoding_service() -> GeocodingService:
    """Get geocoding service instance"""
    global _geocoding_service
    if _geocoding_service is None:
        _geocoding_service = GeocodingService(precision=settings.GEOHASH_PRECISION)
    return _geocoding_service


class LocateRequest(GeocodeInput):
    """Request to resolve a meetup location, optionally with stored coordinates"""
    latitude: Optional[float] = Field(None, ge=-90, le=90, allow_inf_nan=False)
    longitude: Optional[float] = Field(None, ge=-180, le=180, allow_inf_nan=False)
    precision: Optional[int] = Field(None, ge=1, le=MAX_GEOHASH_PRECISION)


class GeohashResponse(BaseModel):
    """Geohash for a coordinate pair"""
    geohash: str
    precision: int


def _geocode_or_422(data: GeocodeInput) -> GeocodeResult:
    result = get_geocoding_service().geocode(data)
    if result is None:
        logger.info("Rejected geocode request without any address part")
        raise HTTPException(status_code=422, detail=EMPTY_ADDRESS_DETAIL)
    return result


@router.post("/forward", response_model=GeocodeResult)
@limiter.limit(settings.GEOCODING_RATE_LIMIT)
async def geocode_address(request: Request, body: GeocodeInput):
    """
    Forward geocoding: Convert address parts to deterministic coordinates

    Example: {"address": "1600 Pennsylvania Ave", "zip_code": "20500"}
    """
    return _geocode_or_422(body)


@router.get("/forward", response_model=GeocodeResult)
@limiter.limit(settings.GEOCODING_RATE_LIMIT)
async def geocode_address_get(
    request: Request,
    address: Optional[str] = Query(None, description="Street address"),
    address_complement: Optional[str] = Query(None, description="Apartment, floor, building"),
    zip_code: Optional[str] = Query(None, description="Postal code"),
):
    """
    Forward geocoding (GET method)

    Example: /geocoding/forward?address=1600%20Pennsylvania%20Ave&zip_code=20500
    """
    return _geocode_or_422(GeocodeInput(
        address=address,
        address_complement=address_complement,
        zip_code=zip_code,
    ))


@router.get("/geohash", response_model=GeohashResponse)
@limiter.limit(settings.GEOCODING_RATE_LIMIT)
async def get_geohash(
    request: Request,
    lat: float = Query(..., ge=-90, le=90, allow_inf_nan=False, description="Latitude in decimal degrees"),
    lon: float = Query(..., ge=-180, le=180, allow_inf_nan=False, description="Longitude in decimal degrees"),
    precision: Optional[int] = Query(None, ge=1, le=MAX_GEOHASH_PRECISION, description="Geohash length"),
):
    """
    Encode coordinates as a geohash

    Example: /geocoding/geohash?lat=48.8566&lon=2.3522&precision=7
    """
    service = get_geocoding_service()
    geohash = service.encode_geohash(lat, lon, precision)
    return GeohashResponse(geohash=geohash, precision=len(geohash))


@router.get("/geohash/{geohash}", response_model=GeohashBounds)
@limiter.limit(settings.GEOCODING_RATE_LIMIT)
async def get_geohash_bounds(request: Request, geohash: str):
    """
    Decode a geohash into its cell bounds and center

    Example: /geocoding/geohash/u09tvw0f6
    """
    try:
        return decode_geohash(geohash)
    except InvalidGeohash as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/locate", response_model=SessionLocation)
@limiter.limit(settings.GEOCODING_RATE_LIMIT)
async def locate(request: Request, body: LocateRequest):
    """
    Resolve coordinates, geohash and display address for a meetup

    Stored coordinates are reused when both latitude and longitude are sent.

    Example: {"address": "12 Rue de Rivoli", "zip_code": "75004", "precision": 7}
    """
    known = None
    if body.latitude is not None and body.longitude is not None:
        known = Coordinates(latitude=body.latitude, longitude=body.longitude)

    location = get_geocoding_service().resolve_location(body, known=known, precision=body.precision)
    if location is None:
        logger.info("Rejected locate request without any address part")
        raise HTTPException(status_code=422, detail=EMPTY_ADDRESS_DETAIL)

    return location
