"""
Pydantic schemas for City content.
"""
from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime
from tripcalc.models.city import TravelStyle

CITY_ID_PATTERN = r"^[a-z0-9-]+$"
LAST_UPDATED_PATTERN = r"^\d{4}-\d{2}$"


class CityBase(BaseModel):
    """Base city schema."""
    name: str = Field(min_length=2, max_length=100)
    country: str = Field(min_length=2, max_length=100)
    country_code: Optional[str] = Field(default=None, min_length=2, max_length=2)
    region: Optional[str] = None
    currency: str = Field(min_length=3, max_length=3)  # ISO 4217
    currency_symbol: str = Field(max_length=5)
    language: str = Field(min_length=2)
    timezone: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    description: Optional[str] = Field(default=None, max_length=1000)
    image_url: Optional[str] = None
    is_published: bool = False
    last_updated: str = Field(pattern=LAST_UPDATED_PATTERN)  # YYYY-MM


class CityCreate(CityBase):
    """Schema for city creation."""
    id: str = Field(min_length=2, max_length=50, pattern=CITY_ID_PATTERN)


class CityUpdate(BaseModel):
    """Schema for city update."""
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    country: Optional[str] = Field(default=None, min_length=2, max_length=100)
    country_code: Optional[str] = Field(default=None, min_length=2, max_length=2)
    region: Optional[str] = None
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)
    currency_symbol: Optional[str] = Field(default=None, max_length=5)
    language: Optional[str] = Field(default=None, min_length=2)
    timezone: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    description: Optional[str] = Field(default=None, max_length=1000)
    image_url: Optional[str] = None
    is_published: Optional[bool] = None
    last_updated: Optional[str] = Field(default=None, pattern=LAST_UPDATED_PATTERN)


class CityPublish(BaseModel):
    """Schema for publishing or unpublishing a city."""
    is_published: bool


class DailyCostCreate(BaseModel):
    """Schema for a daily cost preset, amounts in cents."""
    travel_style: TravelStyle
    accommodation: int = Field(gt=0)
    food: int = Field(gt=0)
    transport: int = Field(gt=0)
    activities: int = Field(gt=0)
    breakfast: Optional[int] = Field(default=None, gt=0)
    lunch: Optional[int] = Field(default=None, gt=0)
    dinner: Optional[int] = Field(default=None, gt=0)
    snacks: Optional[int] = Field(default=None, gt=0)


class DailyCostUpdate(BaseModel):
    """Schema for daily cost preset update."""
    accommodation: Optional[int] = Field(default=None, gt=0)
    food: Optional[int] = Field(default=None, gt=0)
    transport: Optional[int] = Field(default=None, gt=0)
    activities: Optional[int] = Field(default=None, gt=0)
    breakfast: Optional[int] = Field(default=None, gt=0)
    lunch: Optional[int] = Field(default=None, gt=0)
    dinner: Optional[int] = Field(default=None, gt=0)
    snacks: Optional[int] = Field(default=None, gt=0)


class DailyCostResponse(DailyCostCreate):
    """Schema for daily cost preset response."""
    id: int
    city_id: str

    class Config:
        from_attributes = True


class TransportCreate(BaseModel):
    """Schema for a transport option, price in cents."""
    type: str = Field(min_length=2, max_length=50)
    name: str = Field(min_length=2, max_length=100)
    price: int = Field(gt=0)
    price_note: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    tips: Optional[str] = Field(default=None, max_length=500)
    booking_url: Optional[str] = None


class TransportUpdate(BaseModel):
    """Schema for transport option update."""
    type: Optional[str] = Field(default=None, min_length=2, max_length=50)
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    price: Optional[int] = Field(default=None, gt=0)
    price_note: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    tips: Optional[str] = Field(default=None, max_length=500)
    booking_url: Optional[str] = None


class TransportResponse(TransportCreate):
    """Schema for transport option response."""
    id: int
    city_id: str

    class Config:
        from_attributes = True


class TipCreate(BaseModel):
    """Schema for a city tip."""
    category: str = Field(min_length=1, max_length=50)
    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=1000)
    order: int = Field(default=0, ge=0)


class TipUpdate(BaseModel):
    """Schema for city tip update."""
    category: Optional[str] = Field(default=None, min_length=1, max_length=50)
    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    content: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    order: Optional[int] = Field(default=None, ge=0)


class TipResponse(TipCreate):
    """Schema for city tip response."""
    id: int
    city_id: str

    class Config:
        from_attributes = True


CashNeeded = Literal["low", "medium", "high"]
CardsAccepted = Literal["widely", "most-places", "limited"]
AtmAvailability = Literal["everywhere", "common", "limited"]


class CashInfoCreate(BaseModel):
    """Schema for cash and ATM guidance."""
    cash_needed: CashNeeded
    cards_accepted: CardsAccepted
    atm_availability: AtmAvailability
    recommendations: str = Field(min_length=1, max_length=500)
    atm_fees: Optional[str] = Field(default=None, max_length=200)
    best_exchange: Optional[str] = Field(default=None, max_length=200)


class CashInfoUpdate(BaseModel):
    """Schema for cash info update."""
    cash_needed: Optional[CashNeeded] = None
    cards_accepted: Optional[CardsAccepted] = None
    atm_availability: Optional[AtmAvailability] = None
    recommendations: Optional[str] = Field(default=None, min_length=1, max_length=500)
    atm_fees: Optional[str] = Field(default=None, max_length=200)
    best_exchange: Optional[str] = Field(default=None, max_length=200)


class CashInfoResponse(CashInfoCreate):
    """Schema for cash info response."""
    id: int
    city_id: str

    class Config:
        from_attributes = True


class CityResponse(CityCreate):
    """Schema for city response."""
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CitySummaryResponse(BaseModel):
    """Schema for public city list entries."""
    id: str
    name: str
    country: str
    flag: str = ""
    currency: str
    image_url: Optional[str] = None
    distance_km: Optional[float] = None
    distance_label: Optional[str] = None


class CityDetailResponse(CityResponse):
    """Schema for a published city with all its content."""
    flag: str = ""
    daily_costs: List[DailyCostResponse] = []
    transport: List[TransportResponse] = []
    tips: List[TipResponse] = []
    cash_info: Optional[CashInfoResponse] = None


class CityAdminSummary(CityResponse):
    """Schema for admin city list entries with content counts."""
    daily_cost_count: int = 0
    transport_count: int = 0
    tip_count: int = 0
