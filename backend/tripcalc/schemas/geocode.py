"""
Pydantic schemas for geocoding requests.
"""
from pydantic import BaseModel, Field
from typing import Optional


class CityBounds(BaseModel):
    """Bounding box used to bias geocoding results."""
    north: float
    south: float
    east: float
    west: float


class GeocodeRequest(BaseModel):
    """Schema for address geocoding."""
    address: str = Field(min_length=3)
    city_bounds: Optional[CityBounds] = None


class ReverseGeocodeRequest(BaseModel):
    """Schema for reverse geocoding."""
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)


class GeoLocation(BaseModel):
    """Resolved location."""
    lat: float
    lon: float
    address: str
    place_id: Optional[str] = None


class GeocodeResponse(BaseModel):
    """Schema for geocoding response."""
    success: bool = True
    location: GeoLocation
