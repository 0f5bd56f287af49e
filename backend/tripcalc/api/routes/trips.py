"""
Trip management routes.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from tripcalc.db.session import get_db
from tripcalc.models.user import User
from tripcalc.models.trip import Trip, SharedTrip
from tripcalc.schemas.trip import (
    TripCreate, TripUpdate, TripResponse, TripDetailResponse,
    TripSummaryResponse, TripCostsResponse, DailyCostsResponse, BudgetSummaryResponse
)
from tripcalc.schemas.sharing import SharedWithMeResponse, SharedTripSummary
from tripcalc.api.dependencies import get_current_user, to_principal
from tripcalc.services.sharing_service import Principal, can_read, can_write, is_owner, has_explicit_share
from tripcalc.services.cost_service import resolve_effective_costs, has_custom_costs, count_custom_costs, summarize_budget
from tripcalc.services.city_service import get_city_defaults
from tripcalc.services.trip_service import sync_custom_items, copy_trip

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])

# Fields that may be reset to NULL through an update
NULLABLE_UPDATE_FIELDS = {
    "start_date", "end_date",
    "budget_accommodation", "budget_food", "budget_transport", "budget_activities",
}


def _get_trip(trip_id: int, db: Session) -> Trip:
    trip = db.query(Trip).filter(Trip.id == trip_id).first()
    if not trip:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trip not found"
        )
    return trip


def get_trip_for_read(trip_id: int, viewer: Optional[Principal], db: Session) -> Trip:
    """Load a trip the viewer may read: 404 if absent, 403 if not readable."""
    trip = _get_trip(trip_id, db)
    if not can_read(trip, viewer, trip.shares):
        logger.warning(f"Read access to trip {trip_id} denied for user {viewer.id if viewer else None}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied to this trip"
        )
    return trip


def get_trip_for_write(trip_id: int, viewer: Optional[Principal], db: Session) -> Trip:
    """Load a trip the viewer may modify: 404 if absent, 403 unless owner."""
    trip = _get_trip(trip_id, db)
    if not can_write(trip, viewer):
        logger.warning(f"Write access to trip {trip_id} denied for user {viewer.id if viewer else None}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the trip owner can modify this trip"
        )
    return trip


@router.get("", response_model=List[TripSummaryResponse])
async def list_trips(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the current user's own trips, most recently updated first."""
    trips = db.query(Trip).options(selectinload(Trip.custom_items)).filter(
        Trip.user_id == current_user.id
    ).order_by(Trip.updated_at.desc(), Trip.id.desc()).all()

    return [
        TripSummaryResponse.model_validate(trip).model_copy(
            update={"custom_item_count": len(trip.custom_items)}
        )
        for trip in trips
    ]


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new trip and extract its custom items."""
    new_trip = Trip(
        user_id=current_user.id,
        name=trip_data.name,
        city_id=trip_data.city_id,
        city_name=trip_data.city_name,
        start_date=trip_data.start_date,
        end_date=trip_data.end_date,
        days=trip_data.days,
        trip_style=trip_data.trip_style,
        calculator_state=trip_data.calculator_state
    )
    db.add(new_trip)
    db.flush()

    sync_custom_items(new_trip, db)
    db.commit()
    db.refresh(new_trip)

    logger.info(f"User {current_user.id} created trip {new_trip.id}")
    return new_trip


@router.get("/shared-with-me", response_model=List[SharedWithMeResponse])
async def list_shared_with_me(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List trips explicitly shared with the current user."""
    shares = db.query(SharedTrip).options(
        selectinload(SharedTrip.trip),
        selectinload(SharedTrip.shared_by)
    ).filter(
        SharedTrip.shared_with_id == current_user.id
    ).order_by(SharedTrip.created_at.desc(), SharedTrip.id.desc()).all()

    return [
        SharedWithMeResponse(
            trip=SharedTripSummary.model_validate(share.trip),
            shared_by_id=share.shared_by_id,
            shared_by_name=share.shared_by.name,
            shared_by_email=share.shared_by.email,
            message=share.message,
            created_at=share.created_at
        )
        for share in shares
    ]


@router.get("/{trip_id}", response_model=TripDetailResponse)
async def get_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get trip details."""
    viewer = to_principal(current_user)
    trip = get_trip_for_read(trip_id, viewer, db)

    owner_view = is_owner(trip, viewer)
    # The share token is only handed to the owner
    return TripDetailResponse.model_validate(trip).model_copy(update={
        "is_owner": owner_view,
        "share_token": trip.share_token if owner_view else None
    })


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: int,
    trip_data: TripUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Update a trip.
    Omitted fields are left untouched; null budget overrides reset the
    category to the city default.
    """
    trip = get_trip_for_write(trip_id, to_principal(current_user), db)

    updates = trip_data.model_dump(exclude_unset=True)
    for field, value in updates.items():
        if value is None and field not in NULLABLE_UPDATE_FIELDS:
            continue
        setattr(trip, field, value)

    if updates.get("calculator_state") is not None:
        sync_custom_items(trip, db)

    db.commit()
    db.refresh(trip)
    return trip


@router.delete("/{trip_id}")
async def delete_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a trip with its items, expenses and shares."""
    trip = get_trip_for_write(trip_id, to_principal(current_user), db)

    db.delete(trip)
    db.commit()

    logger.info(f"User {current_user.id} deleted trip {trip_id}")
    return {"success": True}


@router.get("/{trip_id}/costs", response_model=TripCostsResponse)
async def get_trip_costs(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get effective daily costs and budget vs. actual spending."""
    trip = get_trip_for_read(trip_id, to_principal(current_user), db)

    city_defaults = get_city_defaults(trip.city_id, trip.trip_style, db)
    costs = resolve_effective_costs(trip, city_defaults)
    summary = summarize_budget(costs, trip.days, trip.expenses)

    return TripCostsResponse(
        trip_id=trip.id,
        city_defaults=DailyCostsResponse(**city_defaults.as_dict()),
        effective_costs=DailyCostsResponse(**costs.as_dict()),
        has_custom_costs=has_custom_costs(trip),
        custom_cost_count=count_custom_costs(trip),
        budget=BudgetSummaryResponse.model_validate(summary)
    )


@router.post("/{trip_id}/copy", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def copy_shared_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Copy an own or explicitly shared trip into the current user's trips."""
    viewer = to_principal(current_user)
    trip = _get_trip(trip_id, db)

    if not is_owner(trip, viewer) and not has_explicit_share(viewer, trip.shares):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied"
        )

    return copy_trip(trip, current_user.id, db)
