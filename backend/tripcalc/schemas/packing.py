"""
Pydantic schemas for PackingList entity.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime


class PackingListSave(BaseModel):
    """Schema for creating or updating a packing list."""
    trip_id: Optional[int] = None
    list_id: Optional[int] = None  # Existing list to update
    luggage_type: str = Field(min_length=1, max_length=50)
    weight_limit: float = Field(gt=0)
    duration: int = Field(ge=1)
    trip_type: str = Field(min_length=1, max_length=50)
    climate: Optional[str] = Field(default=None, max_length=50)
    items: List[Dict[str, Any]] = []
    total_weight: float = Field(default=0, ge=0)
    tips: Optional[Any] = None


class PackingListResponse(BaseModel):
    """Schema for packing list response."""
    id: int
    user_id: int
    trip_id: Optional[int] = None
    luggage_type: str
    weight_limit: float
    duration: int
    trip_type: str
    climate: Optional[str] = None
    items: List[Dict[str, Any]] = []
    total_weight: float
    tips: Optional[Any] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
