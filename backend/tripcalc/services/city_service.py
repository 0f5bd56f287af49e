"""
City service for published city lookups and cost presets.
"""
from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from tripcalc.models.city import City, CityDailyCost
from tripcalc.models.trip import TripStyle
from tripcalc.services.cost_service import DailyCostSet, travel_style_for


def get_published_city(city_id: str, db: Session) -> Optional[City]:
    """Get a published city with all its content loaded."""
    return db.query(City).options(
        selectinload(City.daily_costs),
        selectinload(City.transport),
        selectinload(City.tips),
        selectinload(City.cash_info)
    ).filter(
        City.id == city_id,
        City.is_published.is_(True)
    ).first()


def list_published_cities(db: Session) -> List[City]:
    """List published cities ordered by name."""
    return db.query(City).filter(City.is_published.is_(True)).order_by(City.name.asc()).all()


def get_city_defaults(city_id: str, trip_style: TripStyle, db: Session) -> DailyCostSet:
    """
    Get a city's default daily costs for a trip style, in major units.

    A city without a preset for the style, or an unknown city, resolves to
    zero costs so that trip overrides still apply.
    """
    preset = db.query(CityDailyCost).filter(
        CityDailyCost.city_id == city_id,
        CityDailyCost.travel_style == travel_style_for(trip_style)
    ).first()

    if not preset:
        return DailyCostSet.zero()
    return DailyCostSet.from_cents(preset)
