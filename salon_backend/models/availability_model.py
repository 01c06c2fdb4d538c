# salon_backend/models/availability_model.py
from sqlalchemy import Column, Integer, Boolean, DateTime
from sqlalchemy.types import String

from salon_backend.database.session import Base, new_id
from salon_backend.models._timestamps import utcnow


class Availability(Base):
    """Recurring weekly working window of an employee."""
    __tablename__ = "availability"

    id           = Column(String(64), primary_key=True, default=new_id)
    employee_id  = Column(String(64), nullable=False, index=True)
    service_id   = Column(String(64), nullable=True)   # None = applies to every service
    day_of_week  = Column(Integer, nullable=False)     # 0 = Sunday ... 6 = Saturday
    start_time   = Column(String(5), nullable=False)   # HH:MM
    end_time     = Column(String(5), nullable=False)
    is_available = Column(Boolean, nullable=False, default=True)
    start_date   = Column(String(10), nullable=True)   # YYYY-MM-DD
    end_date     = Column(String(10), nullable=True)
    created_at   = Column(DateTime, nullable=False, default=utcnow)
    updated_at   = Column(DateTime, nullable=False, default=utcnow)
