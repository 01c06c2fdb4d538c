# salon_backend/routers/employee_services_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from salon_backend.database.session import get_db
from salon_backend.queries import service_queries
from salon_backend.routers.deps import downstream, require_roles
from salon_backend.schemas import ApiResponse, EmployeeServiceCreate, EmployeeServiceOut, IdOut

router = APIRouter(prefix="/employee-services", tags=["employee-services"])


@router.get("", response_model=ApiResponse[List[EmployeeServiceOut]])
def list_employee_services(
    employee_id: Optional[str] = Query(default=None, alias="employeeId"),
    service_id: Optional[str] = Query(default=None, alias="serviceId"),
    db: Session = Depends(get_db),
):
    with downstream(db, "fetch employee services"):
        links = service_queries.get_employee_services(db, employee_id=employee_id, service_id=service_id)
    return ApiResponse(data=[EmployeeServiceOut.model_validate(link) for link in links])


@router.post("", response_model=ApiResponse[IdOut])
def create_employee_service(
    body: EmployeeServiceCreate,
    db: Session = Depends(get_db),
    _owner=Depends(require_roles("owner")),
):
    with downstream(db, "create employee service"):
        link_id = service_queries.create_employee_service(db, body.model_dump())
    return ApiResponse(data=IdOut(id=link_id))


@router.delete("/{link_id}", response_model=ApiResponse[None])
def delete_employee_service(
    link_id: str,
    db: Session = Depends(get_db),
    _owner=Depends(require_roles("owner")),
):
    with downstream(db, "delete employee service"):
        deleted = service_queries.delete_employee_service(db, link_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Employee service not found")
    return ApiResponse(data=None)
