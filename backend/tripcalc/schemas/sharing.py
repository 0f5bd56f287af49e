"""
Pydantic schemas for trip sharing.
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Any, List, Optional
from datetime import date, datetime
from tripcalc.models.trip import TripStyle
from tripcalc.schemas.expense import CustomItemResponse, ExpenseResponse
from tripcalc.schemas.trip import DailyCostsResponse, TripResponse


class ShareToggle(BaseModel):
    """Schema for turning the public link on or off."""
    is_public: bool


class ShareToggleResponse(BaseModel):
    """Schema for share toggle response."""
    trip: TripResponse
    share_url: Optional[str] = None


class ShareWithUser(BaseModel):
    """Schema for sharing a trip with a registered user."""
    email: EmailStr
    message: Optional[str] = Field(default=None, max_length=500)


class SharedUserResponse(BaseModel):
    """User a trip is explicitly shared with."""
    user_id: int
    name: Optional[str] = None
    email: str
    image: Optional[str] = None
    message: Optional[str] = None
    created_at: datetime


class SharedTripSummary(BaseModel):
    """Trip fields visible to share recipients."""
    id: int
    name: str
    city_id: str
    city_name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    days: int
    trip_style: TripStyle
    is_public: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SharedWithMeResponse(BaseModel):
    """Trip shared with the current user, with the sharer."""
    trip: SharedTripSummary
    shared_by_id: int
    shared_by_name: Optional[str] = None
    shared_by_email: str
    message: Optional[str] = None
    created_at: datetime


class PublicTripResponse(SharedTripSummary):
    """Public view of a trip fetched by share token."""
    calculator_state: Optional[List[Any]] = None
    custom_items: List[CustomItemResponse] = []
    expenses: List[ExpenseResponse] = []
    effective_costs: Optional[DailyCostsResponse] = None
