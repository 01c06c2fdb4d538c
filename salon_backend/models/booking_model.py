# salon_backend/models/booking_model.py
from sqlalchemy import Column, DateTime
from sqlalchemy.types import String, Unicode, UnicodeText

from salon_backend.database.session import Base, new_id
from salon_backend.models._timestamps import utcnow


class Booking(Base):
    __tablename__ = "bookings"

    id                 = Column(String(64), primary_key=True, default=new_id)
    salon_id           = Column(String(64), nullable=False, index=True)
    employee_id        = Column(String(64), nullable=False, index=True)
    service_id         = Column(String(64), nullable=False)
    client_id          = Column(String(128), nullable=True)
    client_name        = Column(Unicode(200), nullable=False)
    client_email       = Column(Unicode(255))
    client_phone       = Column(Unicode(32))
    booking_date       = Column(String(10), nullable=False)  # YYYY-MM-DD
    booking_time       = Column(String(5), nullable=False)   # HH:MM
    status             = Column(String(20), nullable=False, default="pending")
    created_by_role    = Column(String(20))
    created_by_name    = Column(Unicode(200))
    created_by_user_id = Column(String(128))
    notes              = Column(UnicodeText)
    created_at         = Column(DateTime, nullable=False, default=utcnow)
    updated_at         = Column(DateTime, nullable=False, default=utcnow)
    cancelled_at       = Column(DateTime)
    completed_at       = Column(DateTime)
