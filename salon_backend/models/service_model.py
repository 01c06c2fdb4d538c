# salon_backend/models/service_model.py
from sqlalchemy import Column, Integer, Float, Boolean, DateTime
from sqlalchemy.types import String, Unicode, UnicodeText

from salon_backend.database.session import Base, new_id
from salon_backend.models._timestamps import utcnow


class Service(Base):
    __tablename__ = "services"

    id          = Column(String(64), primary_key=True, default=new_id)
    salon_id    = Column(String(64), nullable=False, index=True)
    name        = Column(Unicode(200), nullable=False)
    description = Column(UnicodeText)
    duration    = Column(Integer, nullable=False)  # minutes
    price       = Column(Float, nullable=False)
    category    = Column(String(40), nullable=False, default="other")
    is_active   = Column(Boolean, nullable=False, default=True)
    created_at  = Column(DateTime, nullable=False, default=utcnow)
    updated_at  = Column(DateTime, nullable=False, default=utcnow)
