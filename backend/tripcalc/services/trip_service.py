"""
Trip service for custom item syncing and trip copies.
"""
import logging
from sqlalchemy.orm import Session
from typing import Any, List, Optional
from tripcalc.models.city import City
from tripcalc.models.expense import CustomItem, ItemCategory
from tripcalc.models.trip import Trip

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "USD"


def normalize_item_name(raw_name: str) -> str:
    """Lowercase, trim and collapse whitespace so names group across users."""
    return " ".join(raw_name.lower().split())


def extract_custom_items(calculator_state: Optional[List[Any]], trip: Trip, currency: str) -> List[CustomItem]:
    """
    Build CustomItem rows from the day plans of a calculator state.

    Each day may carry a `customItems` list of {name, category, amount, notes}
    with amounts in cents. Malformed entries are skipped.
    """
    items = []
    for day in calculator_state or []:
        if not isinstance(day, dict) or not isinstance(day.get("customItems"), list):
            continue
        for raw in day["customItems"]:
            try:
                name = str(raw["name"]).strip()
                category = ItemCategory(raw["category"])
                amount = int(raw["amount"])
            except (KeyError, TypeError, ValueError):
                logger.warning(f"Skipping malformed custom item on trip {trip.id}: {raw}")
                continue
            if not name or amount <= 0:
                logger.warning(f"Skipping custom item without name or amount on trip {trip.id}: {raw}")
                continue
            items.append(CustomItem(
                trip_id=trip.id,
                name=name,
                normalized_name=normalize_item_name(name),
                category=category,
                amount=amount,
                currency=currency,
                notes=raw.get("notes") or None,
                city_id=trip.city_id
            ))
    return items


def sync_custom_items(trip: Trip, db: Session) -> int:
    """Replace a trip's custom items with the ones in its calculator state."""
    city = db.query(City).filter(City.id == trip.city_id).first()
    currency = city.currency if city else DEFAULT_CURRENCY

    db.query(CustomItem).filter(CustomItem.trip_id == trip.id).delete()
    items = extract_custom_items(trip.calculator_state, trip, currency)
    db.add_all(items)
    return len(items)


def copy_trip(trip: Trip, owner_id: int, db: Session) -> Trip:
    """
    Copy a trip into another user's trips.

    Budget overrides and custom items are carried over; the copy starts
    private with no share token.
    """
    new_trip = Trip(
        user_id=owner_id,
        city_id=trip.city_id,
        city_name=trip.city_name,
        name=f"{trip.name} (copy)",
        start_date=trip.start_date,
        end_date=trip.end_date,
        days=trip.days,
        trip_style=trip.trip_style,
        calculator_state=trip.calculator_state,
        budget_accommodation=trip.budget_accommodation,
        budget_food=trip.budget_food,
        budget_transport=trip.budget_transport,
        budget_activities=trip.budget_activities,
        is_public=False,
        share_token=None
    )
    db.add(new_trip)
    db.flush()

    for item in trip.custom_items:
        db.add(CustomItem(
            trip_id=new_trip.id,
            name=item.name,
            normalized_name=item.normalized_name,
            category=item.category,
            amount=item.amount,
            currency=item.currency,
            notes=item.notes,
            city_id=item.city_id
        ))

    db.commit()
    db.refresh(new_trip)
    logger.info(f"Copied trip {trip.id} to trip {new_trip.id} for user {owner_id}")
    return new_trip
