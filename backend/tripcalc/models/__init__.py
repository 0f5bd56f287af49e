"""Models package - Import all models for SQLAlchemy registration."""
from tripcalc.models.user import User
from tripcalc.models.city import City, CityDailyCost, CityTransport, CityTip, CityCashInfo, TravelStyle
from tripcalc.models.trip import Trip, SharedTrip, TripStyle
from tripcalc.models.expense import Expense, CustomItem, ItemCategory
from tripcalc.models.packing_list import PackingList

__all__ = [
    "User",
    "City",
    "CityDailyCost",
    "CityTransport",
    "CityTip",
    "CityCashInfo",
    "TravelStyle",
    "Trip",
    "SharedTrip",
    "TripStyle",
    "Expense",
    "CustomItem",
    "ItemCategory",
    "PackingList",
]
