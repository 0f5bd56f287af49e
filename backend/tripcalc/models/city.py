"""
City content models: destinations and their cost presets.
"""
from sqlalchemy import Column, String, Boolean, Float, Integer, Text, ForeignKey, UniqueConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
from tripcalc.db.base import BaseModel
import enum


class TravelStyle(str, enum.Enum):
    """Travel style keys used by city daily cost presets."""
    BUDGET = "budget"
    MID_RANGE = "midRange"
    LUXURY = "luxury"


class City(BaseModel):
    """Destination city. Identified by a URL slug rather than the surrogate key."""
    __tablename__ = "cities"

    id = Column(String(50), primary_key=True)
    name = Column(String(100), nullable=False, index=True)
    country = Column(String(100), nullable=False)
    country_code = Column(String(2), nullable=True)
    region = Column(String(100), nullable=True)
    currency = Column(String(3), nullable=False)
    currency_symbol = Column(String(5), nullable=False)
    language = Column(String(50), nullable=False)
    timezone = Column(String(50), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    is_published = Column(Boolean, default=False, nullable=False, index=True)
    last_updated = Column(String(7), nullable=False)  # YYYY-MM

    # Relationships
    daily_costs = relationship("CityDailyCost", back_populates="city", cascade="all, delete-orphan")
    transport = relationship("CityTransport", back_populates="city", cascade="all, delete-orphan")
    tips = relationship("CityTip", back_populates="city", cascade="all, delete-orphan", order_by="CityTip.order")
    cash_info = relationship("CityCashInfo", back_populates="city", uselist=False, cascade="all, delete-orphan")


class CityDailyCost(BaseModel):
    """Daily cost preset for one travel style, amounts in cents."""
    __tablename__ = "city_daily_costs"

    city_id = Column(String(50), ForeignKey("cities.id"), nullable=False, index=True)
    travel_style = Column(SQLEnum(TravelStyle), nullable=False)
    accommodation = Column(Integer, nullable=False)
    food = Column(Integer, nullable=False)
    transport = Column(Integer, nullable=False)
    activities = Column(Integer, nullable=False)
    breakfast = Column(Integer, nullable=True)
    lunch = Column(Integer, nullable=True)
    dinner = Column(Integer, nullable=True)
    snacks = Column(Integer, nullable=True)

    # Relationships
    city = relationship("City", back_populates="daily_costs")

    # One preset per travel style per city
    __table_args__ = (
        UniqueConstraint('city_id', 'travel_style', name='uq_city_travel_style'),
    )


class CityTransport(BaseModel):
    """Local transport option with a reference price in cents."""
    __tablename__ = "city_transport"

    city_id = Column(String(50), ForeignKey("cities.id"), nullable=False, index=True)
    type = Column(String(50), nullable=False)  # metro, bus, taxi, uber, train
    name = Column(String(100), nullable=False)
    price = Column(Integer, nullable=False)
    price_note = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    tips = Column(Text, nullable=True)
    booking_url = Column(String(500), nullable=True)

    city = relationship("City", back_populates="transport")


class CityTip(BaseModel):
    """Editorial tip shown on the city page."""
    __tablename__ = "city_tips"

    city_id = Column(String(50), ForeignKey("cities.id"), nullable=False, index=True)
    category = Column(String(50), nullable=False)  # payment, safety, culture, ...
    title = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    order = Column(Integer, default=0, nullable=False)

    city = relationship("City", back_populates="tips")


class CityCashInfo(BaseModel):
    """Cash and ATM guidance, at most one row per city."""
    __tablename__ = "city_cash_info"

    city_id = Column(String(50), ForeignKey("cities.id"), nullable=False, unique=True)
    cash_needed = Column(String(10), nullable=False)  # low, medium, high
    cards_accepted = Column(String(20), nullable=False)  # widely, most-places, limited
    atm_availability = Column(String(20), nullable=False)  # everywhere, common, limited
    recommendations = Column(Text, nullable=False)
    atm_fees = Column(String(200), nullable=True)
    best_exchange = Column(String(200), nullable=True)

    city = relationship("City", back_populates="cash_info")
