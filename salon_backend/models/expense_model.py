# salon_backend/models/expense_model.py
from sqlalchemy import Column, Float, Boolean, DateTime
from sqlalchemy.types import String, Unicode, UnicodeText

from salon_backend.database.session import Base, new_id
from salon_backend.models._timestamps import utcnow


class Expense(Base):
    __tablename__ = "expenses"

    id             = Column(String(64), primary_key=True, default=new_id)
    salon_id       = Column(String(64), nullable=False, index=True)
    category       = Column(String(40), nullable=False)
    name           = Column(Unicode(200), nullable=False)
    description    = Column(UnicodeText)
    amount         = Column(Float, nullable=False)  # euros
    frequency      = Column(String(20), nullable=False, default="one-time")
    date           = Column(String(10), nullable=False)
    is_recurring   = Column(Boolean, nullable=False, default=False)
    is_paid        = Column(Boolean, nullable=False, default=True)
    payment_method = Column(String(20))
    vendor         = Column(Unicode(200))
    receipt_url    = Column(Unicode(500))
    notes          = Column(UnicodeText)
    created_at     = Column(DateTime, nullable=False, default=utcnow)
    updated_at     = Column(DateTime, nullable=False, default=utcnow)
