# salon_backend/routers/blocked_slots_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from salon_backend.database.session import get_db
from salon_backend.queries import availability_queries
from salon_backend.routers.deps import downstream, require_roles
from salon_backend.schemas import ApiResponse, BlockedSlotCreate, BlockedSlotOut, IdOut

router = APIRouter(prefix="/blocked-slots", tags=["blocked-slots"])

_staff = require_roles("owner", "employee")


@router.get("", response_model=ApiResponse[List[BlockedSlotOut]])
def list_blocked_slots(
    employee_id: Optional[str] = Query(default=None, alias="employeeId"),
    service_id: Optional[str] = Query(default=None, alias="serviceId"),
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
):
    if not employee_id:
        raise HTTPException(status_code=400, detail="Employee ID is required")
    with downstream(db, "fetch blocked slots"):
        slots = availability_queries.get_blocked_slots(
            db, employee_id, service_id=service_id, start_date=start_date, end_date=end_date,
        )
    return ApiResponse(data=[BlockedSlotOut.model_validate(s) for s in slots])


@router.post("", response_model=ApiResponse[IdOut])
def create_blocked_slot(
    body: BlockedSlotCreate,
    db: Session = Depends(get_db),
    _user=Depends(_staff),
):
    with downstream(db, "create blocked slot"):
        slot_id = availability_queries.create_blocked_slot(db, body.model_dump())
    return ApiResponse(data=IdOut(id=slot_id))


@router.delete("/{blocked_slot_id}", response_model=ApiResponse[None])
def delete_blocked_slot(
    blocked_slot_id: str,
    db: Session = Depends(get_db),
    _user=Depends(_staff),
):
    with downstream(db, "delete blocked slot"):
        deleted = availability_queries.delete_blocked_slot(db, blocked_slot_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Blocked slot not found")
    return ApiResponse(data=None)
