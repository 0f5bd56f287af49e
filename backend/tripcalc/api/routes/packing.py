"""
Packing list routes. Saving lists is a premium feature.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from tripcalc.db.session import get_db
from tripcalc.models.user import User
from tripcalc.models.packing_list import PackingList
from tripcalc.schemas.packing import PackingListSave, PackingListResponse
from tripcalc.api.dependencies import get_current_user, to_principal
from tripcalc.api.routes.trips import get_trip_for_write
from tripcalc.services.sharing_service import has_premium

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/packing-lists", tags=["packing"])


def _get_own_list(list_id: int, user_id: int, db: Session) -> PackingList:
    packing_list = db.query(PackingList).filter(PackingList.id == list_id).first()
    if not packing_list:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Packing list not found"
        )
    if packing_list.user_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied"
        )
    return packing_list


@router.post("", response_model=PackingListResponse)
async def save_packing_list(
    list_data: PackingListSave,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a packing list, or update one when list_id is given."""
    principal = to_principal(current_user)
    if not has_premium(principal):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Premium feature"
        )

    if list_data.trip_id is not None:
        get_trip_for_write(list_data.trip_id, principal, db)

    fields = list_data.model_dump(exclude={"list_id"})
    if list_data.list_id is not None:
        packing_list = _get_own_list(list_data.list_id, current_user.id, db)
        for field, value in fields.items():
            setattr(packing_list, field, value)
    else:
        packing_list = PackingList(user_id=current_user.id, **fields)
        db.add(packing_list)

    db.commit()
    db.refresh(packing_list)
    return packing_list


@router.get("", response_model=List[PackingListResponse])
async def list_packing_lists(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the current user's packing lists."""
    return db.query(PackingList).filter(
        PackingList.user_id == current_user.id
    ).order_by(PackingList.updated_at.desc(), PackingList.id.desc()).all()


@router.get("/{list_id}", response_model=PackingListResponse)
async def get_packing_list(
    list_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get one of the current user's packing lists."""
    return _get_own_list(list_id, current_user.id, db)


@router.delete("/{list_id}")
async def delete_packing_list(
    list_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete one of the current user's packing lists."""
    packing_list = _get_own_list(list_id, current_user.id, db)
    db.delete(packing_list)
    db.commit()
    return {"success": True}
