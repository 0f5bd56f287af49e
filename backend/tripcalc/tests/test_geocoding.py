"""
Tests for the geocoding service and itinerary geocoding endpoints.
"""
import asyncio
import pytest
from tripcalc.schemas.geocode import CityBounds, GeoLocation
from tripcalc.services import geocoding_service
from tripcalc.services.geocoding_service import AddressNotFound, GeocodingError, GeocodingTimeout

SAGRADA_FAMILIA = GeoLocation(lat=41.4036, lon=2.1744, address="Sagrada Familia, Barcelona", place_id="123")


def fake_get(response, calls):
    async def _get(path, params):
        calls.append((path, params))
        return response
    return _get


def test_geocode_restricts_to_city_bounds(monkeypatch):
    calls = []
    monkeypatch.setattr(geocoding_service, "_get", fake_get(
        [{"lat": "41.4036", "lon": "2.1744", "display_name": "Sagrada Familia", "place_id": 123}], calls
    ))
    bounds = CityBounds(north=41.47, south=41.32, east=2.23, west=2.05)

    location = asyncio.run(geocoding_service.geocode("Sagrada Familia", bounds))

    assert location == GeoLocation(lat=41.4036, lon=2.1744, address="Sagrada Familia", place_id="123")
    path, params = calls[0]
    assert path == "/search"
    assert params["viewbox"] == "2.05,41.47,2.23,41.32"
    assert params["bounded"] == "1"


def test_geocode_without_bounds(monkeypatch):
    calls = []
    monkeypatch.setattr(geocoding_service, "_get", fake_get(
        [{"lat": "1", "lon": "2", "display_name": "Somewhere"}], calls
    ))

    location = asyncio.run(geocoding_service.geocode("Somewhere"))

    assert location.place_id is None
    assert "viewbox" not in calls[0][1]


def test_geocode_no_result(monkeypatch):
    monkeypatch.setattr(geocoding_service, "_get", fake_get([], []))

    with pytest.raises(AddressNotFound):
        asyncio.run(geocoding_service.geocode("Nowhere at all"))


def test_reverse_geocode_error_payload(monkeypatch):
    monkeypatch.setattr(geocoding_service, "_get", fake_get({"error": "Unable to geocode"}, []))

    with pytest.raises(AddressNotFound):
        asyncio.run(geocoding_service.reverse_geocode(0.0, 0.0))


def test_geocode_endpoint(client, owner, auth, monkeypatch):
    async def fake_geocode(address, city_bounds=None):
        return SAGRADA_FAMILIA

    monkeypatch.setattr(geocoding_service, "geocode", fake_geocode)

    response = client.post("/api/itinerary/geocode", json={"address": "Sagrada Familia"}, headers=auth(owner))

    assert response.status_code == 200
    assert response.json() == {"success": True, "location": SAGRADA_FAMILIA.model_dump()}


def test_geocode_endpoint_requires_auth(client):
    response = client.post("/api/itinerary/geocode", json={"address": "Sagrada Familia"})

    assert response.status_code == 401


def test_geocode_endpoint_validates_address(client, owner, auth):
    response = client.post("/api/itinerary/geocode", json={"address": "ab"}, headers=auth(owner))

    assert response.status_code == 422


def test_geocode_endpoint_maps_errors(client, owner, auth, monkeypatch):
    """Test upstream failures map to 404, 504 and 502."""
    for error, expected in ((AddressNotFound("x"), 404), (GeocodingTimeout("x"), 504), (GeocodingError("x"), 502)):
        async def failing_geocode(address, city_bounds=None, error=error):
            raise error

        monkeypatch.setattr(geocoding_service, "geocode", failing_geocode)

        response = client.post("/api/itinerary/geocode", json={"address": "Somewhere"}, headers=auth(owner))

        assert response.status_code == expected


def test_reverse_geocode_endpoint(client, owner, auth, monkeypatch):
    async def fake_reverse(lat, lon):
        return SAGRADA_FAMILIA

    monkeypatch.setattr(geocoding_service, "reverse_geocode", fake_reverse)

    response = client.post("/api/itinerary/reverse-geocode", json={"lat": 41.4, "lon": 2.17}, headers=auth(owner))
    out_of_range = client.post("/api/itinerary/reverse-geocode", json={"lat": 91, "lon": 0}, headers=auth(owner))

    assert response.status_code == 200
    assert response.json()["location"]["address"] == "Sagrada Familia, Barcelona"
    assert out_of_range.status_code == 422
