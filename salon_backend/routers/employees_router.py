# salon_backend/routers/employees_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from salon_backend.config.settings import DEFAULT_SALON_ID
from salon_backend.database.session import get_db
from salon_backend.queries import employee_queries
from salon_backend.routers.deps import downstream, require_roles
from salon_backend.schemas import ApiResponse, EmployeeCreate, EmployeeOut, EmployeeUpdate, IdOut
from salon_backend.schemas.common import updates_from

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=ApiResponse[List[EmployeeOut]])
def list_employees(
    salon_id: Optional[str] = Query(default=None, alias="salonId"),
    db: Session = Depends(get_db),
):
    with downstream(db, "fetch employees"):
        employees = employee_queries.get_employees(db, salon_id=salon_id)
    return ApiResponse(data=[EmployeeOut.model_validate(e) for e in employees])


@router.get("/{employee_id}", response_model=ApiResponse[EmployeeOut])
def get_employee(employee_id: str, db: Session = Depends(get_db)):
    with downstream(db, "fetch employee"):
        emp = employee_queries.get_employee(db, employee_id)
    if not emp:
        raise HTTPException(status_code=404, detail="Employee not found")
    return ApiResponse(data=EmployeeOut.model_validate(emp))


@router.post("", response_model=ApiResponse[IdOut])
def create_employee(
    body: EmployeeCreate,
    db: Session = Depends(get_db),
    _owner=Depends(require_roles("owner")),
):
    data = body.model_dump()
    data["salon_id"] = data.get("salon_id") or DEFAULT_SALON_ID
    with downstream(db, "create employee"):
        employee_id = employee_queries.create_employee(db, data)
    return ApiResponse(data=IdOut(id=employee_id))


@router.put("/{employee_id}", response_model=ApiResponse[IdOut])
def update_employee(
    employee_id: str,
    body: EmployeeUpdate,
    db: Session = Depends(get_db),
    _owner=Depends(require_roles("owner")),
):
    with downstream(db, "update employee"):
        emp = employee_queries.update_employee(db, employee_id, updates_from(body))
    if not emp:
        raise HTTPException(status_code=404, detail="Employee not found")
    return ApiResponse(data=IdOut(id=employee_id))


@router.delete("/{employee_id}", response_model=ApiResponse[None])
def delete_employee(
    employee_id: str,
    db: Session = Depends(get_db),
    _owner=Depends(require_roles("owner")),
):
    if not employee_id.strip():
        raise HTTPException(status_code=400, detail="Employee ID is required")
    with downstream(db, "delete employee"):
        deleted = employee_queries.delete_employee(db, employee_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Employee not found")
    return ApiResponse(data=None)
