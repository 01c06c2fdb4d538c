# salon_backend/routers/slots_router.py
from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from salon_backend.config.settings import MIN_BOOKING_BUFFER_MINUTES
from salon_backend.database.session import get_db
from salon_backend.queries import availability_queries, booking_queries, service_queries
from salon_backend.routers.deps import downstream
from salon_backend.schemas import ApiResponse, AvailableSlotsOut, TimeSlot
from salon_backend.services.slot_service import compute_slots, day_number, windows_for_date

router = APIRouter(prefix="/slots", tags=["slots"])


def _pick_windows(rows, service_id: str):
    """Generic windows plus the ones for this service; everything the employee has when neither exists."""
    matching = [r for r in rows if not r.service_id or r.service_id == service_id]
    return matching or rows


@router.get("/available", response_model=ApiResponse[AvailableSlotsOut])
def available_slots(
    employee_id: Optional[str] = Query(default=None, alias="employeeId"),
    service_id: Optional[str] = Query(default=None, alias="serviceId"),
    day: Optional[str] = Query(default=None, alias="date"),
    db: Session = Depends(get_db),
):
    if not employee_id or not service_id or not day:
        raise HTTPException(status_code=400, detail="employeeId, serviceId, and date are required")
    try:
        requested = date.fromisoformat(day)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid value for date: expected YYYY-MM-DD")

    now = datetime.now()
    if requested < now.date():
        return ApiResponse(data=AvailableSlotsOut(date=day, slots=[]))

    with downstream(db, "fetch available slots"):
        service = service_queries.get_service(db, service_id)
        if not service:
            raise HTTPException(status_code=404, detail="Service not found")

        rows = availability_queries.get_availability(db, employee_id)
        windows = windows_for_date(_pick_windows(rows, service_id), day, day_number(requested))

        booked = [
            b.booking_time
            for b in booking_queries.get_bookings(db, employee_id=employee_id, start_date=day, end_date=day)
            if b.status != "cancelled"
        ]
        blocked = availability_queries.get_blocked_slots(
            db, employee_id, service_id=service_id, start_date=day, end_date=day,
        )

    slots = compute_slots(
        day, service.duration, windows, booked, blocked,
        now=now, buffer_minutes=MIN_BOOKING_BUFFER_MINUTES,
    )
    return ApiResponse(data=AvailableSlotsOut(
        date=day,
        slots=[TimeSlot(time=t, available=ok) for t, ok in slots],
    ))
