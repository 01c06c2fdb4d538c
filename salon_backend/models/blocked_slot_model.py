# salon_backend/models/blocked_slot_model.py
from sqlalchemy import Column, DateTime
from sqlalchemy.types import String, Unicode

from salon_backend.database.session import Base, new_id
from salon_backend.models._timestamps import utcnow


class BlockedSlot(Base):
    """Time an employee took off on a specific date."""
    __tablename__ = "blocked_slots"

    id          = Column(String(64), primary_key=True, default=new_id)
    employee_id = Column(String(64), nullable=False, index=True)
    service_id  = Column(String(64), nullable=True)
    date        = Column(String(10), nullable=False)
    start_time  = Column(String(5), nullable=False)
    end_time    = Column(String(5), nullable=True)  # None = one service duration
    reason      = Column(Unicode(255))
    created_at  = Column(DateTime, nullable=False, default=utcnow)
    updated_at  = Column(DateTime, nullable=False, default=utcnow)
