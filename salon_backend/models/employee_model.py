# salon_backend/models/employee_model.py
from sqlalchemy import Column, Float, DateTime
from sqlalchemy.types import String, Unicode, UnicodeText

from salon_backend.database.session import Base, new_id
from salon_backend.models._timestamps import utcnow


class Employee(Base):
    __tablename__ = "employees"

    id            = Column(String(64), primary_key=True, default=new_id)
    user_id       = Column(String(128), nullable=True, index=True)
    salon_id      = Column(String(64), nullable=False, index=True)
    first_name    = Column(Unicode(100), nullable=False)
    last_name     = Column(Unicode(100), nullable=False)
    email         = Column(Unicode(255))
    phone         = Column(Unicode(32))
    bio           = Column(UnicodeText)
    profile_image = Column(Unicode(500))
    position      = Column(Unicode(100))
    commission    = Column(Float)
    status        = Column(String(20), nullable=False, default="active")  # 'active' / 'inactive'
    created_at    = Column(DateTime, nullable=False, default=utcnow)
    updated_at    = Column(DateTime, nullable=False, default=utcnow)

    @property
    def name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)
