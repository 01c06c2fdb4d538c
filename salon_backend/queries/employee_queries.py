# salon_backend/queries/employee_queries.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from salon_backend.models.employee_model import Employee
from salon_backend.models.employee_service_model import EmployeeService
from salon_backend.models.user_model import User
from salon_backend.queries._helpers import apply_updates

logger = logging.getLogger(__name__)


def get_employees(db: Session, salon_id: Optional[str] = None) -> List[Employee]:
    q = db.query(Employee)
    if salon_id:
        q = q.filter(Employee.salon_id == salon_id)
    return q.order_by(Employee.created_at.desc(), Employee.id).all()


def get_employee(db: Session, employee_id: str) -> Optional[Employee]:
    return db.get(Employee, employee_id)


def create_employee(db: Session, data: Dict[str, Any]) -> str:
    emp = Employee()
    apply_updates(emp, data, stamp=False)
    db.add(emp)
    db.commit()
    logger.info("Employee %s created in salon %s", emp.id, emp.salon_id)
    return emp.id


def update_employee(db: Session, employee_id: str, updates: Dict[str, Any]) -> Optional[Employee]:
    emp = db.get(Employee, employee_id)
    if not emp:
        return None
    apply_updates(emp, updates)
    db.commit()
    db.refresh(emp)
    return emp


def delete_employee(db: Session, employee_id: str) -> bool:
    """Removes the employee, its service assignments and its user profile."""
    emp = db.get(Employee, employee_id)
    if not emp:
        return False

    db.query(EmployeeService).filter(EmployeeService.employee_id == employee_id).delete(
        synchronize_session=False
    )
    if emp.user_id:
        profile = db.get(User, emp.user_id)
        if profile:
            db.delete(profile)
    db.delete(emp)
    db.commit()
    logger.info("Employee %s deleted", employee_id)
    return True
