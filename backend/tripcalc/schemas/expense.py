"""
Pydantic schemas for Expense and CustomItem entities.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date as dt_date, datetime
from tripcalc.models.expense import ItemCategory


class ExpenseCreate(BaseModel):
    """Schema for expense creation and replacement."""
    name: str = Field(min_length=1, max_length=100)
    category: ItemCategory
    amount: int = Field(gt=0, le=10_000_000)  # cents, max 100k
    currency: str = Field(min_length=3, max_length=3)
    date: Optional[dt_date] = None  # defaults to today
    notes: Optional[str] = Field(default=None, max_length=500)


class ExpenseResponse(BaseModel):
    """Schema for expense response."""
    id: int
    trip_id: int
    name: str
    category: ItemCategory
    amount: int
    currency: str
    date: dt_date
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CustomItemResponse(BaseModel):
    """Schema for custom item response."""
    id: int
    name: str
    category: ItemCategory
    amount: int
    currency: str
    notes: Optional[str] = None

    class Config:
        from_attributes = True
