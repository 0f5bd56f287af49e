"""
Current user profile routes.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from tripcalc.db.session import get_db
from tripcalc.schemas.user import UserResponse, UserUpdate, UserStats
from tripcalc.models.user import User
from tripcalc.models.trip import Trip
from tripcalc.models.expense import Expense
from tripcalc.api.dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return current_user


@router.patch("/me", response_model=UserResponse)
async def update_profile(
    profile_data: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the current user's name or email."""
    if profile_data.email is not None and profile_data.email != current_user.email:
        existing = db.query(User).filter(User.email == profile_data.email).first()
        if existing:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already in use"
            )
        current_user.email = profile_data.email

    if profile_data.name is not None:
        current_user.name = profile_data.name

    db.commit()
    db.refresh(current_user)
    return current_user


@router.get("/me/stats", response_model=UserStats)
async def get_profile_stats(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Count the current user's trips, shared trips and expenses.
    A trip counts as shared once it has a share token, even if the link is off.
    """
    trips = db.query(Trip).filter(Trip.user_id == current_user.id)
    total_expenses = db.query(Expense).join(Trip, Expense.trip_id == Trip.id).filter(
        Trip.user_id == current_user.id
    ).count()

    return UserStats(
        total_trips=trips.count(),
        shared_trips=trips.filter(Trip.share_token.isnot(None), Trip.share_token != "").count(),
        total_expenses=total_expenses
    )


@router.delete("/me")
async def delete_account(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete the current user with their trips, packing lists and received shares."""
    user_id = current_user.id
    db.delete(current_user)
    db.commit()

    logger.info(f"User {user_id} deleted their account")
    return {"success": True}
