"""
User model for account flags and ownership.
"""
from sqlalchemy import Column, String, Boolean
from sqlalchemy.orm import relationship
from tripcalc.db.base import BaseModel


class User(BaseModel):
    """User account mirrored from the identity provider."""
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=True)
    image = Column(String(500), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    is_premium = Column(Boolean, default=False, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)

    # Relationships
    trips = relationship("Trip", back_populates="user", cascade="all, delete-orphan")
    packing_lists = relationship("PackingList", back_populates="user", cascade="all, delete-orphan")
    shared_with_me = relationship(
        "SharedTrip", foreign_keys="SharedTrip.shared_with_id",
        back_populates="shared_with", cascade="all, delete-orphan"
    )
