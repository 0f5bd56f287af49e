"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, Field
from typing import Any, List, Optional
from datetime import date, datetime
from decimal import Decimal
from tripcalc.models.trip import TripStyle
from tripcalc.schemas.expense import CustomItemResponse

# Upper bound for a daily cost override, in cents
MAX_BUDGET_OVERRIDE = 1_000_000


class TripCreate(BaseModel):
    """Schema for trip creation."""
    name: str = Field(min_length=1, max_length=100)
    city_id: str = Field(min_length=1)
    city_name: str = Field(min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    days: int = Field(ge=1, le=30)
    trip_style: TripStyle
    calculator_state: Optional[List[Any]] = None


class TripUpdate(BaseModel):
    """
    Schema for trip update.
    Omitted fields are left untouched; a budget override sent as null
    resets that category to the city default.
    """
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    days: Optional[int] = Field(default=None, ge=1, le=30)
    trip_style: Optional[TripStyle] = None
    calculator_state: Optional[List[Any]] = None
    budget_accommodation: Optional[int] = Field(default=None, ge=0, le=MAX_BUDGET_OVERRIDE)
    budget_food: Optional[int] = Field(default=None, ge=0, le=MAX_BUDGET_OVERRIDE)
    budget_transport: Optional[int] = Field(default=None, ge=0, le=MAX_BUDGET_OVERRIDE)
    budget_activities: Optional[int] = Field(default=None, ge=0, le=MAX_BUDGET_OVERRIDE)


class TripSummaryResponse(BaseModel):
    """Schema for trip list entries."""
    id: int
    name: str
    city_id: str
    city_name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    days: int
    trip_style: TripStyle
    custom_item_count: int = 0
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TripResponse(BaseModel):
    """Schema for trip response."""
    id: int
    user_id: int
    name: str
    city_id: str
    city_name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    days: int
    trip_style: TripStyle
    calculator_state: Optional[List[Any]] = None
    budget_accommodation: Optional[int] = None
    budget_food: Optional[int] = None
    budget_transport: Optional[int] = None
    budget_activities: Optional[int] = None
    is_public: bool
    share_token: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TripDetailResponse(TripResponse):
    """Schema for detailed trip response with custom items."""
    custom_items: List[CustomItemResponse] = []
    is_owner: bool = False


class DailyCostsResponse(BaseModel):
    """Daily costs in major currency units."""
    accommodation: Decimal
    food: Decimal
    transport: Decimal
    activities: Decimal


class CategoryBudgetResponse(BaseModel):
    """Planned vs. actual for one category."""
    category: str
    planned: Decimal
    actual: Decimal
    difference: Decimal
    percent_used: float

    class Config:
        from_attributes = True


class BudgetSummaryResponse(BaseModel):
    """Planned vs. actual for the whole trip."""
    days: int
    daily_total: Decimal
    planned_total: Decimal
    actual_total: Decimal
    difference: Decimal
    percent_used: float
    status: str
    categories: List[CategoryBudgetResponse] = []

    class Config:
        from_attributes = True


class TripCostsResponse(BaseModel):
    """Schema for resolved trip costs."""
    trip_id: int
    city_defaults: DailyCostsResponse
    effective_costs: DailyCostsResponse
    has_custom_costs: bool
    custom_cost_count: int
    budget: BudgetSummaryResponse
