"""
Admin routes for city content management.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, selectinload
from typing import List
from tripcalc.db.session import get_db
from tripcalc.models.user import User
from tripcalc.models.city import City, CityDailyCost, CityTransport, CityTip, CityCashInfo
from tripcalc.schemas.city import (
    CityCreate, CityUpdate, CityPublish, CityResponse, CityDetailResponse, CityAdminSummary,
    DailyCostCreate, DailyCostUpdate, DailyCostResponse,
    TransportCreate, TransportUpdate, TransportResponse,
    TipCreate, TipUpdate, TipResponse,
    CashInfoCreate, CashInfoUpdate, CashInfoResponse
)
from tripcalc.api.dependencies import get_current_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/cities", tags=["admin"])


def get_city_or_404(city_id: str, db: Session) -> City:
    """Get any city, published or draft."""
    city = db.query(City).filter(City.id == city_id).first()
    if not city:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="City not found"
        )
    return city


def _get_child_or_404(model, child_id: int, city_id: str, db: Session, label: str):
    row = db.query(model).filter(model.id == child_id, model.city_id == city_id).first()
    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label} not found"
        )
    return row


def _apply_updates(row, data) -> None:
    """Apply a partial update. Null on a NOT NULL column leaves the value unchanged."""
    columns = row.__table__.columns
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and not columns[field].nullable:
            continue
        setattr(row, field, value)


@router.get("", response_model=List[CityAdminSummary])
async def list_all_cities(
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """List all cities, published and drafts, with content counts."""
    cities = db.query(City).options(
        selectinload(City.daily_costs),
        selectinload(City.transport),
        selectinload(City.tips)
    ).order_by(City.name.asc()).all()

    return [
        CityAdminSummary.model_validate(city).model_copy(update={
            "daily_cost_count": len(city.daily_costs),
            "transport_count": len(city.transport),
            "tip_count": len(city.tips),
        })
        for city in cities
    ]


@router.post("", response_model=CityResponse, status_code=status.HTTP_201_CREATED)
async def create_city(
    city_data: CityCreate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Create a new city."""
    if db.query(City).filter(City.id == city_data.id).first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="City ID already exists"
        )

    city = City(**city_data.model_dump())
    db.add(city)
    db.commit()
    db.refresh(city)

    logger.info(f"Admin {admin.id} created city {city.id}")
    return city


@router.get("/{city_id}", response_model=CityDetailResponse)
async def get_city_details(
    city_id: str,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Get complete city details, including drafts."""
    return get_city_or_404(city_id, db)


@router.patch("/{city_id}", response_model=CityResponse)
async def update_city(
    city_id: str,
    city_data: CityUpdate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Update city details."""
    city = get_city_or_404(city_id, db)
    _apply_updates(city, city_data)
    db.commit()
    db.refresh(city)
    return city


@router.delete("/{city_id}")
async def delete_city(
    city_id: str,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Delete a city with all its content."""
    city = get_city_or_404(city_id, db)
    db.delete(city)
    db.commit()

    logger.info(f"Admin {admin.id} deleted city {city_id}")
    return {"success": True, "message": "City deleted successfully"}


@router.post("/{city_id}/publish", response_model=CityResponse)
async def set_city_published(
    city_id: str,
    publish_data: CityPublish,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Publish or unpublish a city."""
    city = get_city_or_404(city_id, db)
    city.is_published = publish_data.is_published
    db.commit()
    db.refresh(city)

    logger.info(f"Admin {admin.id} set city {city_id} published={publish_data.is_published}")
    return city


@router.post("/{city_id}/costs", response_model=DailyCostResponse, status_code=status.HTTP_201_CREATED)
async def create_daily_cost(
    city_id: str,
    cost_data: DailyCostCreate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Add a daily cost preset for a travel style."""
    get_city_or_404(city_id, db)

    existing = db.query(CityDailyCost).filter(
        CityDailyCost.city_id == city_id,
        CityDailyCost.travel_style == cost_data.travel_style
    ).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This travel style already exists for this city"
        )

    daily_cost = CityDailyCost(city_id=city_id, **cost_data.model_dump())
    db.add(daily_cost)
    db.commit()
    db.refresh(daily_cost)
    return daily_cost


@router.patch("/{city_id}/costs/{cost_id}", response_model=DailyCostResponse)
async def update_daily_cost(
    city_id: str,
    cost_id: int,
    cost_data: DailyCostUpdate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Update a daily cost preset."""
    daily_cost = _get_child_or_404(CityDailyCost, cost_id, city_id, db, "Daily cost")
    _apply_updates(daily_cost, cost_data)
    db.commit()
    db.refresh(daily_cost)
    return daily_cost


@router.delete("/{city_id}/costs/{cost_id}")
async def delete_daily_cost(
    city_id: str,
    cost_id: int,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Delete a daily cost preset."""
    daily_cost = _get_child_or_404(CityDailyCost, cost_id, city_id, db, "Daily cost")
    db.delete(daily_cost)
    db.commit()
    return {"success": True}


@router.post("/{city_id}/transport", response_model=TransportResponse, status_code=status.HTTP_201_CREATED)
async def create_transport(
    city_id: str,
    transport_data: TransportCreate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Add a transport option."""
    get_city_or_404(city_id, db)

    transport = CityTransport(city_id=city_id, **transport_data.model_dump())
    db.add(transport)
    db.commit()
    db.refresh(transport)
    return transport


@router.patch("/{city_id}/transport/{transport_id}", response_model=TransportResponse)
async def update_transport(
    city_id: str,
    transport_id: int,
    transport_data: TransportUpdate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Update a transport option."""
    transport = _get_child_or_404(CityTransport, transport_id, city_id, db, "Transport option")
    _apply_updates(transport, transport_data)
    db.commit()
    db.refresh(transport)
    return transport


@router.delete("/{city_id}/transport/{transport_id}")
async def delete_transport(
    city_id: str,
    transport_id: int,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Delete a transport option."""
    transport = _get_child_or_404(CityTransport, transport_id, city_id, db, "Transport option")
    db.delete(transport)
    db.commit()
    return {"success": True}


@router.post("/{city_id}/tips", response_model=TipResponse, status_code=status.HTTP_201_CREATED)
async def create_tip(
    city_id: str,
    tip_data: TipCreate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Add a city tip."""
    get_city_or_404(city_id, db)

    tip = CityTip(city_id=city_id, **tip_data.model_dump())
    db.add(tip)
    db.commit()
    db.refresh(tip)
    return tip


@router.patch("/{city_id}/tips/{tip_id}", response_model=TipResponse)
async def update_tip(
    city_id: str,
    tip_id: int,
    tip_data: TipUpdate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Update a city tip."""
    tip = _get_child_or_404(CityTip, tip_id, city_id, db, "Tip")
    _apply_updates(tip, tip_data)
    db.commit()
    db.refresh(tip)
    return tip


@router.delete("/{city_id}/tips/{tip_id}")
async def delete_tip(
    city_id: str,
    tip_id: int,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Delete a city tip."""
    tip = _get_child_or_404(CityTip, tip_id, city_id, db, "Tip")
    db.delete(tip)
    db.commit()
    return {"success": True}


@router.post("/{city_id}/cash-info", response_model=CashInfoResponse, status_code=status.HTTP_201_CREATED)
async def create_cash_info(
    city_id: str,
    cash_data: CashInfoCreate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Add cash and ATM guidance. A city has at most one."""
    city = get_city_or_404(city_id, db)
    if city.cash_info:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Cash info already exists for this city. Use PATCH to update."
        )

    cash_info = CityCashInfo(city_id=city_id, **cash_data.model_dump())
    db.add(cash_info)
    db.commit()
    db.refresh(cash_info)
    return cash_info


@router.patch("/{city_id}/cash-info/{cash_info_id}", response_model=CashInfoResponse)
async def update_cash_info(
    city_id: str,
    cash_info_id: int,
    cash_data: CashInfoUpdate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Update cash and ATM guidance."""
    cash_info = _get_child_or_404(CityCashInfo, cash_info_id, city_id, db, "Cash info")
    _apply_updates(cash_info, cash_data)
    db.commit()
    db.refresh(cash_info)
    return cash_info


@router.delete("/{city_id}/cash-info/{cash_info_id}")
async def delete_cash_info(
    city_id: str,
    cash_info_id: int,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Delete cash and ATM guidance."""
    cash_info = _get_child_or_404(CityCashInfo, cash_info_id, city_id, db, "Cash info")
    db.delete(cash_info)
    db.commit()
    return {"success": True}
