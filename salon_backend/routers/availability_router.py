# salon_backend/routers/availability_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from salon_backend.database.session import get_db
from salon_backend.queries import availability_queries
from salon_backend.routers.deps import downstream, require_roles
from salon_backend.schemas import (
    ApiResponse, AvailabilityCreate, AvailabilityOut, AvailabilityUpdate, IdOut,
)
from salon_backend.schemas.common import updates_from
from salon_backend.services.slot_service import to_minutes

router = APIRouter(prefix="/availability", tags=["availability"])

_staff = require_roles("owner", "employee")


def _check_window(start_time: Optional[str], end_time: Optional[str]) -> None:
    if start_time and end_time and to_minutes(end_time) <= to_minutes(start_time):
        raise HTTPException(status_code=400, detail="Invalid value for endTime: must be after startTime")


@router.get("", response_model=ApiResponse[List[AvailabilityOut]])
def list_availability(
    employee_id: Optional[str] = Query(default=None, alias="employeeId"),
    service_id: Optional[str] = Query(default=None, alias="serviceId"),
    db: Session = Depends(get_db),
):
    if not employee_id:
        raise HTTPException(status_code=400, detail="Employee ID is required")
    with downstream(db, "fetch availability"):
        rows = availability_queries.get_availability(db, employee_id, service_id=service_id)
    return ApiResponse(data=[AvailabilityOut.model_validate(r) for r in rows])


@router.post("", response_model=ApiResponse[IdOut])
def create_availability(
    body: AvailabilityCreate,
    db: Session = Depends(get_db),
    _user=Depends(_staff),
):
    _check_window(body.start_time, body.end_time)
    with downstream(db, "create availability"):
        entry_id = availability_queries.create_availability(db, body.model_dump())
    return ApiResponse(data=IdOut(id=entry_id))


@router.put("/{availability_id}", response_model=ApiResponse[AvailabilityOut])
def update_availability(
    availability_id: str,
    body: AvailabilityUpdate,
    db: Session = Depends(get_db),
    _user=Depends(_staff),
):
    updates = updates_from(body)
    with downstream(db, "update availability"):
        current = availability_queries.get_availability_entry(db, availability_id)
        if not current:
            raise HTTPException(status_code=404, detail="Availability not found")
        _check_window(
            updates.get("start_time", current.start_time),
            updates.get("end_time", current.end_time),
        )
        entry = availability_queries.update_availability(db, availability_id, updates)
    return ApiResponse(data=AvailabilityOut.model_validate(entry))


@router.delete("/{availability_id}", response_model=ApiResponse[None])
def delete_availability(
    availability_id: str,
    db: Session = Depends(get_db),
    _user=Depends(_staff),
):
    with downstream(db, "delete availability"):
        deleted = availability_queries.delete_availability(db, availability_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Availability not found")
    return ApiResponse(data=None)
