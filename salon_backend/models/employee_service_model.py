# salon_backend/models/employee_service_model.py
from sqlalchemy import Column, Boolean, DateTime, UniqueConstraint
from sqlalchemy.types import String

from salon_backend.database.session import Base, new_id
from salon_backend.models._timestamps import utcnow


class EmployeeService(Base):
    """Which employee offers which service."""
    __tablename__ = "employee_services"
    __table_args__ = (UniqueConstraint("employee_id", "service_id", name="uq_employee_service"),)

    id          = Column(String(64), primary_key=True, default=new_id)
    employee_id = Column(String(64), nullable=False, index=True)
    service_id  = Column(String(64), nullable=False, index=True)
    is_offered  = Column(Boolean, nullable=False, default=True)
    created_at  = Column(DateTime, nullable=False, default=utcnow)
