"""
Expense management routes.
"""
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from tripcalc.db.session import get_db
from tripcalc.models.user import User
from tripcalc.models.expense import Expense
from tripcalc.schemas.expense import ExpenseCreate, ExpenseResponse
from tripcalc.api.dependencies import get_current_user, to_principal
from tripcalc.api.routes.trips import get_trip_for_read, get_trip_for_write

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["expenses"])


def _get_expense(trip_id: int, expense_id: int, db: Session) -> Expense:
    expense = db.query(Expense).filter(
        Expense.id == expense_id,
        Expense.trip_id == trip_id
    ).first()
    if not expense:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found"
        )
    return expense


@router.get("/{trip_id}/expenses", response_model=List[ExpenseResponse])
async def list_expenses(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List expenses for a trip, newest first."""
    get_trip_for_read(trip_id, to_principal(current_user), db)

    return db.query(Expense).filter(
        Expense.trip_id == trip_id
    ).order_by(Expense.date.desc(), Expense.id.desc()).all()


@router.post("/{trip_id}/expenses", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    trip_id: int,
    expense_data: ExpenseCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record an expense against a trip."""
    get_trip_for_write(trip_id, to_principal(current_user), db)

    expense = Expense(
        trip_id=trip_id,
        name=expense_data.name,
        category=expense_data.category,
        amount=expense_data.amount,
        currency=expense_data.currency.upper(),
        date=expense_data.date or date.today(),
        notes=expense_data.notes or None
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)

    return expense


@router.put("/{trip_id}/expenses/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    trip_id: int,
    expense_id: int,
    expense_data: ExpenseCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace an expense. The date is kept when none is sent."""
    get_trip_for_write(trip_id, to_principal(current_user), db)
    expense = _get_expense(trip_id, expense_id, db)

    expense.name = expense_data.name
    expense.category = expense_data.category
    expense.amount = expense_data.amount
    expense.currency = expense_data.currency.upper()
    expense.date = expense_data.date or expense.date
    expense.notes = expense_data.notes or None
    db.commit()
    db.refresh(expense)

    return expense


@router.delete("/{trip_id}/expenses/{expense_id}")
async def delete_expense(
    trip_id: int,
    expense_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an expense."""
    get_trip_for_write(trip_id, to_principal(current_user), db)
    expense = _get_expense(trip_id, expense_id, db)

    db.delete(expense)
    db.commit()

    return {"success": True}
