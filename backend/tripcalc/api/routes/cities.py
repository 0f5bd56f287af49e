"""
Public city routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from tripcalc.core.utils import country_flag, haversine_km, format_distance
from tripcalc.db.session import get_db
from tripcalc.schemas.city import CityDetailResponse, CitySummaryResponse
from tripcalc.services.city_service import get_published_city, list_published_cities

router = APIRouter(prefix="/cities", tags=["cities"])


@router.get("", response_model=List[CitySummaryResponse])
async def list_cities(
    lat: Optional[float] = Query(default=None, ge=-90, le=90),
    lon: Optional[float] = Query(default=None, ge=-180, le=180),
    db: Session = Depends(get_db)
):
    """
    List published cities by name.
    With both lat and lon, cities are sorted by distance from that point;
    cities without coordinates come last.
    """
    summaries = []
    for city in list_published_cities(db):
        summary = CitySummaryResponse(
            id=city.id,
            name=city.name,
            country=city.country,
            flag=country_flag(city.country_code or ""),
            currency=city.currency,
            image_url=city.image_url
        )
        if lat is not None and lon is not None and city.latitude is not None and city.longitude is not None:
            distance = haversine_km(lat, lon, city.latitude, city.longitude)
            summary.distance_km = round(distance, 1)
            summary.distance_label = format_distance(distance)
        summaries.append(summary)

    if lat is not None and lon is not None:
        summaries.sort(key=lambda s: (s.distance_km is None, s.distance_km or 0))
    return summaries


@router.get("/{city_id}", response_model=CityDetailResponse)
async def get_city(city_id: str, db: Session = Depends(get_db)):
    """Get a published city with costs, transport, tips and cash info."""
    city = get_published_city(city_id, db)
    if not city:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="City not found"
        )

    return CityDetailResponse.model_validate(city).model_copy(
        update={"flag": country_flag(city.country_code or "")}
    )
