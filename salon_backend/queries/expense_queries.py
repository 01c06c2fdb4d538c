# salon_backend/queries/expense_queries.py
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from salon_backend.models.expense_model import Expense
from salon_backend.queries._helpers import apply_updates


def get_expenses(
    db: Session,
    salon_id: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> List[Expense]:
    q = db.query(Expense)
    if salon_id:
        q = q.filter(Expense.salon_id == salon_id)
    if start_date:
        q = q.filter(Expense.date >= start_date)
    if end_date:
        q = q.filter(Expense.date <= end_date)
    return q.order_by(Expense.date.desc(), Expense.created_at.desc()).all()


def get_expense(db: Session, expense_id: str) -> Optional[Expense]:
    return db.get(Expense, expense_id)


def create_expense(db: Session, data: Dict[str, Any]) -> Expense:
    expense = Expense()
    apply_updates(expense, data, stamp=False)
    db.add(expense)
    db.commit()
    db.refresh(expense)
    return expense


def update_expense(db: Session, expense_id: str, updates: Dict[str, Any]) -> Optional[Expense]:
    expense = db.get(Expense, expense_id)
    if not expense:
        return None
    apply_updates(expense, updates)
    db.commit()
    db.refresh(expense)
    return expense


def delete_expense(db: Session, expense_id: str) -> bool:
    expense = db.get(Expense, expense_id)
    if not expense:
        return False
    db.delete(expense)
    db.commit()
    return True
