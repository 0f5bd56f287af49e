"""
Trip sharing routes: public link toggle and explicit user shares.
"""
import logging
from functools import partial
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, selectinload
from typing import List
from tripcalc.core.config import settings
from tripcalc.db.session import get_db
from tripcalc.models.user import User
from tripcalc.models.trip import SharedTrip
from tripcalc.schemas.sharing import ShareToggle, ShareToggleResponse, ShareWithUser, SharedUserResponse
from tripcalc.schemas.trip import TripResponse
from tripcalc.api.dependencies import get_current_user, to_principal
from tripcalc.api.routes.trips import get_trip_for_write
from tripcalc.services.sharing_service import set_public, generate_share_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["sharing"])


def build_share_url(share_token: str) -> str:
    return f"{settings.SITE_URL.rstrip('/')}/shared/{share_token}"


@router.post("/{trip_id}/share", response_model=ShareToggleResponse)
async def toggle_public_sharing(
    trip_id: int,
    share_data: ShareToggle,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Turn the public share link on or off. The token survives turning it off."""
    trip = get_trip_for_write(trip_id, to_principal(current_user), db)

    state = set_public(
        trip,
        share_data.is_public,
        token_factory=partial(generate_share_token, settings.SHARE_TOKEN_LENGTH)
    )
    trip.is_public = state.is_public
    trip.share_token = state.share_token
    db.commit()
    db.refresh(trip)

    logger.info(f"Trip {trip_id} sharing set to {state.visibility.value} by user {current_user.id}")
    return ShareToggleResponse(
        trip=TripResponse.model_validate(trip),
        share_url=build_share_url(state.share_token) if state.is_public else None
    )


@router.get("/{trip_id}/share/user", response_model=List[SharedUserResponse])
async def list_shared_users(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List users this trip is explicitly shared with."""
    get_trip_for_write(trip_id, to_principal(current_user), db)

    shares = db.query(SharedTrip).options(selectinload(SharedTrip.shared_with)).filter(
        SharedTrip.trip_id == trip_id
    ).order_by(SharedTrip.created_at.desc(), SharedTrip.id.desc()).all()

    return [
        SharedUserResponse(
            user_id=share.shared_with.id,
            name=share.shared_with.name,
            email=share.shared_with.email,
            image=share.shared_with.image,
            message=share.message,
            created_at=share.created_at
        )
        for share in shares
    ]


@router.post("/{trip_id}/share/user", response_model=SharedUserResponse, status_code=status.HTTP_201_CREATED)
async def share_with_user(
    trip_id: int,
    share_data: ShareWithUser,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Grant a registered user read access to a trip."""
    get_trip_for_write(trip_id, to_principal(current_user), db)

    target_user = db.query(User).filter(User.email == share_data.email).first()
    if not target_user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    if target_user.id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot share a trip with yourself"
        )

    existing = db.query(SharedTrip).filter(
        SharedTrip.trip_id == trip_id,
        SharedTrip.shared_with_id == target_user.id
    ).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Trip is already shared with this user"
        )

    share = SharedTrip(
        trip_id=trip_id,
        shared_with_id=target_user.id,
        shared_by_id=current_user.id,
        message=share_data.message
    )
    db.add(share)
    db.commit()
    db.refresh(share)

    logger.info(f"Trip {trip_id} shared with user {target_user.id} by user {current_user.id}")
    return SharedUserResponse(
        user_id=target_user.id,
        name=target_user.name,
        email=target_user.email,
        image=target_user.image,
        message=share.message,
        created_at=share.created_at
    )


@router.delete("/{trip_id}/share/user/{user_id}")
async def revoke_user_share(
    trip_id: int,
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Revoke an explicit share. Only the trip owner can revoke."""
    get_trip_for_write(trip_id, to_principal(current_user), db)

    share = db.query(SharedTrip).filter(
        SharedTrip.trip_id == trip_id,
        SharedTrip.shared_with_id == user_id
    ).first()
    if not share:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Share not found"
        )

    db.delete(share)
    db.commit()

    logger.info(f"Trip {trip_id} share with user {user_id} revoked by user {current_user.id}")
    return {"success": True}
