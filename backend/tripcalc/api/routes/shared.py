"""
Anonymous access to publicly shared trips.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from tripcalc.db.session import get_db
from tripcalc.models.trip import Trip
from tripcalc.schemas.sharing import PublicTripResponse
from tripcalc.schemas.trip import DailyCostsResponse
from tripcalc.schemas.expense import ExpenseResponse
from tripcalc.services.cost_service import resolve_effective_costs
from tripcalc.services.city_service import get_city_defaults

router = APIRouter(prefix="/shared", tags=["shared"])


@router.get("/{share_token}", response_model=PublicTripResponse)
async def get_shared_trip(share_token: str, db: Session = Depends(get_db)):
    """
    Get a public trip by its share token.
    A trip whose link was turned off is reported as not found.
    """
    # Filtering on is_public is the visibility gate: a revoked link finds nothing
    trip = db.query(Trip).filter(
        Trip.share_token == share_token,
        Trip.is_public.is_(True)
    ).first()

    if not trip:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trip not found or not public"
        )

    costs = resolve_effective_costs(trip, get_city_defaults(trip.city_id, trip.trip_style, db))
    expenses = sorted(trip.expenses, key=lambda e: (e.date, e.id), reverse=True)

    return PublicTripResponse.model_validate(trip).model_copy(update={
        "expenses": [ExpenseResponse.model_validate(expense) for expense in expenses],
        "effective_costs": DailyCostsResponse(**costs.as_dict())
    })
