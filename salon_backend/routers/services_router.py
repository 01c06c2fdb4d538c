# salon_backend/routers/services_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from salon_backend.config.settings import DEFAULT_SALON_ID
from salon_backend.database.session import get_db
from salon_backend.queries import service_queries
from salon_backend.routers.deps import downstream, require_roles
from salon_backend.schemas import (
    ApiResponse, EmployeeOut, IdOut, ServiceCreate, ServiceOut, ServiceUpdate,
)
from salon_backend.schemas.common import updates_from

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=ApiResponse[List[ServiceOut]])
def list_services(
    salon_id: Optional[str] = Query(default=None, alias="salonId"),
    with_employees: bool = Query(default=False, alias="withEmployees"),
    db: Session = Depends(get_db),
):
    with downstream(db, "fetch services"):
        services = service_queries.get_services(db, salon_id=salon_id, with_employees=with_employees)
    return ApiResponse(data=[ServiceOut.model_validate(s) for s in services])


@router.get("/{service_id}", response_model=ApiResponse[ServiceOut])
def get_service(service_id: str, db: Session = Depends(get_db)):
    with downstream(db, "fetch service"):
        svc = service_queries.get_service(db, service_id)
    if not svc:
        raise HTTPException(status_code=404, detail="Service not found")
    return ApiResponse(data=ServiceOut.model_validate(svc))


@router.get("/{service_id}/employees", response_model=ApiResponse[List[EmployeeOut]])
def get_service_employees(service_id: str, db: Session = Depends(get_db)):
    """Active employees offering the service; empty when nobody does."""
    with downstream(db, "fetch employees for service"):
        employees = service_queries.get_employees_for_service(db, service_id)
    return ApiResponse(data=[EmployeeOut.model_validate(e) for e in employees])


@router.post("", response_model=ApiResponse[IdOut])
def create_service(
    body: ServiceCreate,
    db: Session = Depends(get_db),
    _owner=Depends(require_roles("owner")),
):
    data = body.model_dump(exclude={"employee_ids"})
    data["salon_id"] = data.get("salon_id") or DEFAULT_SALON_ID
    with downstream(db, "create service"):
        service_id = service_queries.create_service(db, data)
        if body.employee_ids:
            service_queries.set_service_employees(db, service_id, body.employee_ids)
    return ApiResponse(data=IdOut(id=service_id))


@router.put("/{service_id}", response_model=ApiResponse[IdOut])
def update_service(
    service_id: str,
    body: ServiceUpdate,
    db: Session = Depends(get_db),
    _owner=Depends(require_roles("owner")),
):
    updates = updates_from(body)
    employee_ids = updates.pop("employee_ids", None)
    with downstream(db, "update service"):
        svc = service_queries.update_service(db, service_id, updates)
        if svc and employee_ids is not None:
            service_queries.set_service_employees(db, service_id, employee_ids)
    if not svc:
        raise HTTPException(status_code=404, detail="Service not found")
    return ApiResponse(data=IdOut(id=service_id))


@router.delete("/{service_id}", response_model=ApiResponse[None])
def delete_service(
    service_id: str,
    db: Session = Depends(get_db),
    _owner=Depends(require_roles("owner")),
):
    with downstream(db, "delete service"):
        deleted = service_queries.delete_service(db, service_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Service not found")
    return ApiResponse(data=None)
