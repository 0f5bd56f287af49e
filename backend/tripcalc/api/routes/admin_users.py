"""
Admin routes for user account management.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session
from tripcalc.db.session import get_db
from tripcalc.models.user import User
from tripcalc.models.trip import Trip
from tripcalc.schemas.user import AdminUserList, AdminUserResponse, AdminUserStats, AdminUserUpdate, UserResponse
from tripcalc.api.dependencies import get_current_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/users", tags=["admin"])


@router.get("", response_model=AdminUserList)
async def list_users(
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """List all users with trip counts and account stats."""
    rows = db.query(User, func.count(Trip.id)).outerjoin(
        Trip, Trip.user_id == User.id
    ).group_by(User.id).order_by(User.created_at.desc(), User.id.desc()).all()

    users = [
        AdminUserResponse.model_validate(user).model_copy(update={"trip_count": trip_count})
        for user, trip_count in rows
    ]

    return AdminUserList(
        users=users,
        stats=AdminUserStats(
            total=len(users),
            premium=sum(1 for u in users if u.is_premium),
            admins=sum(1 for u in users if u.is_admin)
        )
    )


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    update_data: AdminUserUpdate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Toggle premium and admin flags of a user."""
    if update_data.is_premium is None and update_data.is_admin is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid request body"
        )

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    if update_data.is_premium is not None:
        user.is_premium = update_data.is_premium
    if update_data.is_admin is not None:
        user.is_admin = update_data.is_admin
    db.commit()
    db.refresh(user)

    logger.info(f"Admin {admin.id} updated user {user_id}: premium={user.is_premium} admin={user.is_admin}")
    return user
