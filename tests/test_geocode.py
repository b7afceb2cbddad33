"""
Tests for deterministic geocoding

Checks the contract (determinism, range, rounding, join order) rather than
hard-coded coordinates.
"""

import hashlib
import random
import string

import pytest

from services.geocoding import (
    Coordinates,
    GeocodeInput,
    GeocodingService,
    build_query,
    decode_geohash,
    encode_geohash,
    geocode,
    resolve_location,
)
from services.geocoding.geohash import GEOHASH_BASE32


def _random_text(rng: random.Random) -> str:
    alphabet = string.ascii_letters + string.digits + " ,.-'éüß"
    return "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 40)))


def test_geocode_is_deterministic():
    data = GeocodeInput(address="12 Rue de Rivoli", address_complement="3e étage", zip_code="75004")

    first = geocode(data)
    second = geocode(data)

    assert first is not None
    assert first == second


def test_geocode_ignores_case_but_keeps_it_in_normalized_address():
    lower = geocode(GeocodeInput(address="Paris"))
    upper = geocode(GeocodeInput(address="PARIS"))

    assert (lower.latitude, lower.longitude) == (upper.latitude, upper.longitude)
    assert lower.normalized_address == "Paris"
    assert upper.normalized_address == "PARIS"


def test_geocode_trims_parts_before_hashing():
    padded = geocode(GeocodeInput(address="  Paris  ", zip_code=" 75001 "))
    clean = geocode(GeocodeInput(address="Paris", zip_code="75001"))

    assert padded == clean
    assert padded.normalized_address == "Paris, 75001"


@pytest.mark.parametrize(
    "data",
    [
        GeocodeInput(),
        GeocodeInput(address=None, address_complement=None, zip_code=None),
        GeocodeInput(address="  "),
        GeocodeInput(address="", address_complement="\t", zip_code="\n "),
    ],
)
def test_geocode_returns_none_without_address(data):
    assert geocode(data) is None


def test_coordinates_stay_in_range_and_rounded():
    rng = random.Random(20240601)

    for _ in range(10_000):
        result = geocode(GeocodeInput(address=_random_text(rng)))
        if result is None:
            continue

        assert -90 <= result.latitude <= 90
        assert -180 <= result.longitude <= 180
        assert round(result.latitude, 6) == result.latitude
        assert round(result.longitude, 6) == result.longitude


def test_join_order():
    assert geocode(GeocodeInput(address="A", address_complement="B", zip_code="C")).normalized_address == "A, B, C"
    assert geocode(GeocodeInput(address="A", zip_code="C")).normalized_address == "A, C"
    assert build_query(GeocodeInput(address_complement="B", zip_code="C")) == "B, C"


def test_camel_case_aliases_are_accepted():
    data = GeocodeInput.model_validate({"address": "A", "addressComplement": "B", "zipCode": "C"})

    assert build_query(data) == "A, B, C"


def test_derivation_uses_sha256_prefix_bytes():
    """Stored coordinates depend on this exact byte layout"""
    query = "1600 Pennsylvania Ave, 20500"
    digest = hashlib.sha256(query.lower().encode("utf-8")).digest()
    lat_fraction = int.from_bytes(digest[:4], "big") / 0xFFFFFFFF
    lon_fraction = int.from_bytes(digest[4:8], "big") / 0xFFFFFFFF

    result = geocode(GeocodeInput(address="1600 Pennsylvania Ave", zip_code="20500"))

    assert result.latitude == round(-90 + lat_fraction * 180, 6)
    assert result.longitude == round(-180 + lon_fraction * 360, 6)


def test_end_to_end_address_to_geohash():
    result = geocode(GeocodeInput(address="1600 Pennsylvania Ave", zip_code="20500"))

    assert result.normalized_address == "1600 Pennsylvania Ave, 20500"
    assert -90 <= result.latitude <= 90
    assert -180 <= result.longitude <= 180

    geohash = encode_geohash(result.latitude, result.longitude, 9)

    assert len(geohash) == 9
    assert geohash == geohash.lower()
    assert all(c in GEOHASH_BASE32 for c in geohash)


def test_resolve_location_geocodes_when_no_coordinates_are_known():
    data = GeocodeInput(address="1600 Pennsylvania Ave", zip_code="20500")
    expected = geocode(data)

    location = resolve_location(data)

    assert location.normalized_address == expected.normalized_address
    assert location.coordinates.latitude == expected.latitude
    assert location.coordinates.longitude == expected.longitude
    assert location.geohash == encode_geohash(expected.latitude, expected.longitude, 9)


def test_resolve_location_prefers_known_coordinates():
    data = GeocodeInput(address=" 12 Rue de Rivoli ", zip_code="75004")
    known = Coordinates(latitude=48.8566, longitude=2.3522)

    location = resolve_location(data, known=known, precision=6)

    assert location.coordinates == known
    assert location.normalized_address == "12 Rue de Rivoli, 75004"
    assert location.geohash == encode_geohash(48.8566, 2.3522, 6)
    bounds = decode_geohash(location.geohash)
    assert bounds.min_latitude <= 48.8566 <= bounds.max_latitude
    assert bounds.min_longitude <= 2.3522 <= bounds.max_longitude


def test_resolve_location_needs_an_address():
    known = Coordinates(latitude=48.8566, longitude=2.3522)

    assert resolve_location(GeocodeInput()) is None
    assert resolve_location(GeocodeInput(address="   "), known=known) is None


def test_service_uses_configured_precision():
    service = GeocodingService(precision=5)
    data = GeocodeInput(address="Paris")

    assert service.provider == "deterministic"
    assert service.geocode(data) == geocode(data)
    assert len(service.encode_geohash(48.8566, 2.3522)) == 5
    assert len(service.encode_geohash(48.8566, 2.3522, 11)) == 11
    assert len(service.resolve_location(data).geohash) == 5
