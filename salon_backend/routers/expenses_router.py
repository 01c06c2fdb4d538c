# salon_backend/routers/expenses_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from salon_backend.config.settings import DEFAULT_SALON_ID
from salon_backend.database.session import get_db
from salon_backend.queries import expense_queries
from salon_backend.routers.deps import downstream, require_roles
from salon_backend.schemas import ApiResponse, ExpenseCreate, ExpenseOut, ExpenseUpdate
from salon_backend.schemas.common import updates_from

# expenses are owner-only end to end
router = APIRouter(
    prefix="/expenses",
    tags=["expenses"],
    dependencies=[Depends(require_roles("owner"))],
)


@router.get("", response_model=ApiResponse[List[ExpenseOut]])
def list_expenses(
    salon_id: Optional[str] = Query(default=None, alias="salonId"),
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
):
    with downstream(db, "fetch expenses"):
        expenses = expense_queries.get_expenses(db, salon_id=salon_id, start_date=start_date, end_date=end_date)
    return ApiResponse(data=[ExpenseOut.model_validate(e) for e in expenses])


@router.get("/{expense_id}", response_model=ApiResponse[ExpenseOut])
def get_expense(expense_id: str, db: Session = Depends(get_db)):
    with downstream(db, "fetch expense"):
        expense = expense_queries.get_expense(db, expense_id)
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return ApiResponse(data=ExpenseOut.model_validate(expense))


@router.post("", response_model=ApiResponse[ExpenseOut])
def create_expense(body: ExpenseCreate, db: Session = Depends(get_db)):
    data = body.model_dump()
    data["salon_id"] = data.get("salon_id") or DEFAULT_SALON_ID
    with downstream(db, "create expense"):
        expense = expense_queries.create_expense(db, data)
    return ApiResponse(data=ExpenseOut.model_validate(expense))


@router.put("/{expense_id}", response_model=ApiResponse[ExpenseOut])
def update_expense(expense_id: str, body: ExpenseUpdate, db: Session = Depends(get_db)):
    with downstream(db, "update expense"):
        expense = expense_queries.update_expense(db, expense_id, updates_from(body))
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return ApiResponse(data=ExpenseOut.model_validate(expense))


@router.delete("/{expense_id}", response_model=ApiResponse[None])
def delete_expense(expense_id: str, db: Session = Depends(get_db)):
    with downstream(db, "delete expense"):
        deleted = expense_queries.delete_expense(db, expense_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Expense not found")
    return ApiResponse(data=None)
