"""
Geocoding service backed by Nominatim (OpenStreetMap).

Thin pass-through: one upstream request per call, no caching or retries.
"""
import logging
from typing import Optional
import httpx
from tripcalc.core.config import settings
from tripcalc.schemas.geocode import CityBounds, GeoLocation

logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """Upstream geocoding failure."""


class AddressNotFound(GeocodingError):
    """Nominatim returned no result."""


class GeocodingTimeout(GeocodingError):
    """Nominatim did not answer in time."""


def _to_location(result: dict) -> GeoLocation:
    place_id = result.get("place_id")
    return GeoLocation(
        lat=float(result["lat"]),
        lon=float(result["lon"]),
        address=result.get("display_name", ""),
        place_id=str(place_id) if place_id is not None else None
    )


async def _get(path: str, params: dict):
    url = f"{settings.NOMINATIM_URL}{path}"
    try:
        async with httpx.AsyncClient(timeout=settings.GEOCODER_TIMEOUT) as client:
            response = await client.get(url, params=params, headers={"User-Agent": settings.GEOCODER_USER_AGENT})
            response.raise_for_status()
            return response.json()
    except httpx.TimeoutException:
        logger.error(f"Nominatim request to {path} timed out")
        raise GeocodingTimeout("Geocoding service timed out")
    except httpx.HTTPStatusError as e:
        logger.error(f"Nominatim HTTP error: {e.response.status_code} - {e.response.text}")
        raise GeocodingError(f"Nominatim HTTP error: {e.response.status_code}")
    except httpx.HTTPError as e:
        logger.error(f"Nominatim network error: {e}")
        raise GeocodingError(f"Nominatim network error: {str(e)}")


async def geocode(address: str, city_bounds: Optional[CityBounds] = None) -> GeoLocation:
    """
    Geocode a free-text address.

    When city bounds are given, results are restricted to that viewbox.
    """
    params = {
        "q": address,
        "format": "json",
        "limit": "1",
        "addressdetails": "1",
        "accept-language": "en",
    }
    if city_bounds:
        params["viewbox"] = f"{city_bounds.west},{city_bounds.north},{city_bounds.east},{city_bounds.south}"
        params["bounded"] = "1"

    results = await _get("/search", params)
    if not results:
        raise AddressNotFound(f"No result for address '{address}'")
    return _to_location(results[0])


async def reverse_geocode(lat: float, lon: float) -> GeoLocation:
    """Resolve coordinates to the nearest address."""
    params = {
        "lat": str(lat),
        "lon": str(lon),
        "format": "json",
        "addressdetails": "1",
    }
    result = await _get("/reverse", params)
    if not result or "error" in result:
        raise AddressNotFound(f"No address at {lat},{lon}")
    return _to_location(result)
