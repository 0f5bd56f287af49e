"""
Trip model for budget planning and sharing.
"""
from sqlalchemy import Column, String, Date, Boolean, Integer, ForeignKey, Text, JSON, UniqueConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
from tripcalc.db.base import BaseModel
import enum


class TripStyle(str, enum.Enum):
    """Trip style enumeration."""
    BUDGET = "BUDGET"
    MID_RANGE = "MID_RANGE"
    LUXURY = "LUXURY"


class Trip(BaseModel):
    """Trip model representing a planned visit to a city."""
    __tablename__ = "trips"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    city_id = Column(String(50), nullable=False, index=True)
    city_name = Column(String(100), nullable=False)
    name = Column(String(100), nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    days = Column(Integer, nullable=False)
    trip_style = Column(SQLEnum(TripStyle), default=TripStyle.MID_RANGE, nullable=False)
    calculator_state = Column(JSON, nullable=True)  # Day plans as sent by the calculator

    # Daily cost overrides in cents, NULL means use the city default
    budget_accommodation = Column(Integer, nullable=True)
    budget_food = Column(Integer, nullable=True)
    budget_transport = Column(Integer, nullable=True)
    budget_activities = Column(Integer, nullable=True)

    # Public link sharing
    is_public = Column(Boolean, default=False, nullable=False)
    share_token = Column(String(32), unique=True, nullable=True, index=True)

    # Relationships
    user = relationship("User", back_populates="trips")
    custom_items = relationship("CustomItem", back_populates="trip", cascade="all, delete-orphan")
    expenses = relationship("Expense", back_populates="trip", cascade="all, delete-orphan")
    shares = relationship("SharedTrip", back_populates="trip", cascade="all, delete-orphan")
    packing_lists = relationship("PackingList", back_populates="trip")


class SharedTrip(BaseModel):
    """Explicit read grant of a trip to one registered user."""
    __tablename__ = "shared_trips"

    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    shared_with_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    shared_by_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    message = Column(Text, nullable=True)

    # Relationships
    trip = relationship("Trip", back_populates="shares")
    shared_with = relationship("User", foreign_keys=[shared_with_id], back_populates="shared_with_me")
    shared_by = relationship("User", foreign_keys=[shared_by_id])

    __table_args__ = (
        UniqueConstraint('trip_id', 'shared_with_id', name='uq_trip_shared_with'),
    )
