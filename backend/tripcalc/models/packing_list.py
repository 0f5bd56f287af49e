"""
Packing list model.
"""
from sqlalchemy import Column, String, Float, Integer, ForeignKey, JSON
from sqlalchemy.orm import relationship
from tripcalc.db.base import BaseModel


class PackingList(BaseModel):
    """Saved luggage plan, optionally attached to a trip."""
    __tablename__ = "packing_lists"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=True, index=True)
    luggage_type = Column(String(50), nullable=False)
    weight_limit = Column(Float, nullable=False)
    duration = Column(Integer, nullable=False)
    trip_type = Column(String(50), nullable=False)
    climate = Column(String(50), nullable=True)
    items = Column(JSON, nullable=False, default=list)
    total_weight = Column(Float, nullable=False, default=0)
    tips = Column(JSON, nullable=True)

    # Relationships
    user = relationship("User", back_populates="packing_lists")
    trip = relationship("Trip", back_populates="packing_lists")
