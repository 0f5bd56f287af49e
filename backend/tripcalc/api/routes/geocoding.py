"""
Geocoding pass-through routes for itinerary locations.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from tripcalc.models.user import User
from tripcalc.schemas.geocode import GeocodeRequest, ReverseGeocodeRequest, GeocodeResponse
from tripcalc.api.dependencies import get_current_user
from tripcalc.services import geocoding_service
from tripcalc.services.geocoding_service import AddressNotFound, GeocodingError, GeocodingTimeout

router = APIRouter(prefix="/itinerary", tags=["geocoding"])


def _raise_for(error: GeocodingError):
    if isinstance(error, AddressNotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Address not found")
    if isinstance(error, GeocodingTimeout):
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail="Geocoding timeout")
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Geocoding failed")


@router.post("/geocode", response_model=GeocodeResponse)
async def geocode_address(
    request: GeocodeRequest,
    current_user: User = Depends(get_current_user)
):
    """Geocode an address, optionally restricted to a city's bounds."""
    try:
        location = await geocoding_service.geocode(request.address, request.city_bounds)
    except GeocodingError as e:
        _raise_for(e)
    return GeocodeResponse(location=location)


@router.post("/reverse-geocode", response_model=GeocodeResponse)
async def reverse_geocode_point(
    request: ReverseGeocodeRequest,
    current_user: User = Depends(get_current_user)
):
    """Resolve coordinates to an address."""
    try:
        location = await geocoding_service.reverse_geocode(request.lat, request.lon)
    except GeocodingError as e:
        _raise_for(e)
    return GeocodeResponse(location=location)
