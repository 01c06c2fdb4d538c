# salon_backend/schemas/expenses.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from salon_backend.schemas.common import CamelModel, DateStr, IdStr, NameStr, reject_null

ExpenseCategory = Literal[
    "rent", "utilities", "products", "supplies", "staff", "marketing",
    "equipment", "insurance", "taxes", "maintenance", "other",
]
ExpenseFrequency = Literal["one-time", "daily", "weekly", "monthly", "quarterly", "yearly"]
PaymentMethod = Literal["cash", "card", "transfer", "other"]


class ExpenseCreate(CamelModel):
    category: ExpenseCategory
    name: NameStr
    amount: float = Field(gt=0)
    date: DateStr
    description: Optional[str] = None
    frequency: ExpenseFrequency = "one-time"
    is_recurring: bool = False
    is_paid: bool = True
    payment_method: Optional[PaymentMethod] = None
    vendor: Optional[str] = None
    receipt_url: Optional[str] = None
    notes: Optional[str] = None
    salon_id: Optional[IdStr] = None


class ExpenseUpdate(CamelModel):
    category: Optional[ExpenseCategory] = None
    name: Optional[NameStr] = None
    amount: Optional[float] = Field(default=None, gt=0)
    date: Optional[DateStr] = None
    description: Optional[str] = None
    frequency: Optional[ExpenseFrequency] = None
    is_recurring: Optional[bool] = None
    is_paid: Optional[bool] = None
    payment_method: Optional[PaymentMethod] = None
    vendor: Optional[str] = None
    receipt_url: Optional[str] = None
    notes: Optional[str] = None

    @field_validator(
        "category", "name", "amount", "date", "frequency", "is_recurring", "is_paid",
        mode="before",
    )
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)


class ExpenseOut(CamelModel):
    id: str
    salon_id: str
    category: str
    name: str
    description: Optional[str] = None
    amount: float
    frequency: str
    date: str
    is_recurring: bool
    is_paid: bool
    payment_method: Optional[str] = None
    vendor: Optional[str] = None
    receipt_url: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
