"""
Expense and custom item models for tracking spending.
"""
from sqlalchemy import Column, String, Date, ForeignKey, Integer, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship
from tripcalc.db.base import BaseModel
import enum


class ItemCategory(str, enum.Enum):
    """Spending category shared by expenses and custom items."""
    ACCOMMODATION = "ACCOMMODATION"
    FOOD = "FOOD"
    TRANSPORT = "TRANSPORT"
    ACTIVITIES = "ACTIVITIES"
    SHOPPING = "SHOPPING"
    OTHER = "OTHER"


class Expense(BaseModel):
    """Actual spending recorded against a trip."""
    __tablename__ = "expenses"

    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    category = Column(SQLEnum(ItemCategory), nullable=False)
    amount = Column(Integer, nullable=False)  # cents
    currency = Column(String(3), nullable=False, default="USD")
    date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)

    # Relationships
    trip = relationship("Trip", back_populates="expenses")


class CustomItem(BaseModel):
    """Planned extra cost extracted from a trip's calculator state."""
    __tablename__ = "custom_items"

    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    normalized_name = Column(String(100), nullable=False, index=True)
    category = Column(SQLEnum(ItemCategory), nullable=False)
    amount = Column(Integer, nullable=False)  # cents
    currency = Column(String(3), nullable=False, default="USD")
    notes = Column(Text, nullable=True)
    city_id = Column(String(50), nullable=False, index=True)

    trip = relationship("Trip", back_populates="custom_items")
