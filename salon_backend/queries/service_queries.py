# salon_backend/queries/service_queries.py
import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import exists
from sqlalchemy.orm import Session

from salon_backend.models.employee_model import Employee
from salon_backend.models.employee_service_model import EmployeeService
from salon_backend.models.service_model import Service
from salon_backend.queries._helpers import apply_updates

logger = logging.getLogger(__name__)


# ---------- services ----------
def get_services(
    db: Session, salon_id: Optional[str] = None, with_employees: bool = False
) -> List[Service]:
    q = db.query(Service)
    if salon_id:
        q = q.filter(Service.salon_id == salon_id)
    if with_employees:
        offered = exists().where(
            EmployeeService.service_id == Service.id,
            EmployeeService.is_offered.is_(True),
        )
        q = q.filter(offered)
    return q.order_by(Service.created_at.desc(), Service.id).all()


def get_service(db: Session, service_id: str) -> Optional[Service]:
    return db.get(Service, service_id)


def create_service(db: Session, data: Dict[str, Any]) -> str:
    svc = Service()
    apply_updates(svc, data, stamp=False)
    db.add(svc)
    db.commit()
    logger.info("Service %s created (%s)", svc.id, svc.name)
    return svc.id


def update_service(db: Session, service_id: str, updates: Dict[str, Any]) -> Optional[Service]:
    svc = db.get(Service, service_id)
    if not svc:
        return None
    apply_updates(svc, updates)
    db.commit()
    db.refresh(svc)
    return svc


def delete_service(db: Session, service_id: str) -> bool:
    svc = db.get(Service, service_id)
    if not svc:
        return False
    db.query(EmployeeService).filter(EmployeeService.service_id == service_id).delete(
        synchronize_session=False
    )
    db.delete(svc)
    db.commit()
    logger.info("Service %s deleted", service_id)
    return True


# ---------- employee <-> service ----------
def get_employee_services(
    db: Session, employee_id: Optional[str] = None, service_id: Optional[str] = None
) -> List[EmployeeService]:
    q = db.query(EmployeeService)
    if employee_id:
        q = q.filter(EmployeeService.employee_id == employee_id)
    if service_id:
        q = q.filter(EmployeeService.service_id == service_id)
    return q.order_by(EmployeeService.created_at, EmployeeService.id).all()


def create_employee_service(db: Session, data: Dict[str, Any]) -> str:
    """One row per (employee, service): an existing pair is updated in place."""
    link = (
        db.query(EmployeeService)
        .filter(
            EmployeeService.employee_id == data["employee_id"],
            EmployeeService.service_id == data["service_id"],
        )
        .first()
    )
    if link:
        link.is_offered = data.get("is_offered", True)
    else:
        link = EmployeeService()
        apply_updates(link, data, stamp=False)
        db.add(link)
    db.commit()
    return link.id


def delete_employee_service(db: Session, link_id: str) -> bool:
    link = db.get(EmployeeService, link_id)
    if not link:
        return False
    db.delete(link)
    db.commit()
    return True


def set_service_employees(db: Session, service_id: str, employee_ids: Iterable[str]) -> None:
    """Replace the set of employees offering a service."""
    wanted = {e for e in employee_ids if e}
    existing = {
        link.employee_id: link
        for link in db.query(EmployeeService).filter(EmployeeService.service_id == service_id)
    }
    for employee_id, link in existing.items():
        if employee_id not in wanted:
            db.delete(link)
        else:
            link.is_offered = True
    for employee_id in wanted - set(existing):
        db.add(EmployeeService(employee_id=employee_id, service_id=service_id, is_offered=True))
    db.commit()


def get_employees_for_service(db: Session, service_id: str) -> List[Employee]:
    """Active employees with an offered assignment to the service."""
    return (
        db.query(Employee)
        .join(EmployeeService, EmployeeService.employee_id == Employee.id)
        .filter(
            EmployeeService.service_id == service_id,
            EmployeeService.is_offered.is_(True),
            Employee.status == "active",
        )
        .order_by(Employee.created_at.desc(), Employee.id)
        .all()
    )
