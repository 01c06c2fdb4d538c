# salon_backend/routers/bookings_router.py
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from salon_backend.config.settings import DEFAULT_SALON_ID, MIN_CANCEL_HOURS
from salon_backend.database.session import get_db
from salon_backend.models._timestamps import utcnow
from salon_backend.models.user_model import User
from salon_backend.queries import booking_queries, service_queries
from salon_backend.routers.deps import downstream, get_current_user, get_optional_user, require_roles
from salon_backend.schemas import (
    ApiResponse, BookingCreate, BookingOut, BookingUpdate, CancelOut, CancelPayload, IdOut,
)
from salon_backend.schemas.common import updates_from

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


def hours_until(booking_date: str, booking_time: str, now: Optional[datetime] = None) -> float:
    """Hours from ``now`` to the appointment start; negative once it has passed."""
    start = datetime.strptime(f"{booking_date} {booking_time}", "%Y-%m-%d %H:%M")
    return (start - (now or datetime.now())).total_seconds() / 3600


def _display_name(user: User) -> str:
    name = " ".join(p for p in (user.first_name, user.last_name) if p)
    return name or user.email


@router.get("", response_model=ApiResponse[List[BookingOut]])
def list_bookings(
    salon_id: Optional[str] = Query(default=None, alias="salonId"),
    employee_id: Optional[str] = Query(default=None, alias="employeeId"),
    status: Optional[str] = Query(default=None),
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    # clients only ever see their own bookings
    client_email = user.email if user.role == "client" else None
    with downstream(db, "fetch bookings"):
        bookings = booking_queries.get_bookings(
            db, salon_id=salon_id, employee_id=employee_id, status=status,
            start_date=start_date, end_date=end_date, client_email=client_email,
        )
    return ApiResponse(data=[BookingOut.model_validate(b) for b in bookings])


@router.get("/{booking_id}", response_model=ApiResponse[BookingOut])
def get_booking(
    booking_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    with downstream(db, "fetch booking"):
        booking = booking_queries.get_booking(db, booking_id)
    # other clients' bookings read as missing
    if not booking or (user.role == "client" and booking.client_email != user.email):
        raise HTTPException(status_code=404, detail="Booking not found")
    return ApiResponse(data=BookingOut.model_validate(booking))


@router.post("", response_model=ApiResponse[IdOut])
def create_booking(
    body: BookingCreate,
    db: Session = Depends(get_db),
    user: Optional[User] = Depends(get_optional_user),
):
    with downstream(db, "create booking"):
        service = service_queries.get_service(db, body.service_id)
        if not service:
            raise HTTPException(status_code=404, detail="Service not found for this booking")

        data = body.model_dump()
        data["salon_id"] = service.salon_id or DEFAULT_SALON_ID
        if user:
            data["created_by_role"] = user.role
            data["created_by_name"] = _display_name(user)
            data["created_by_user_id"] = user.id
            if user.role == "client":
                data["client_id"] = data.get("client_id") or user.id
                data["client_email"] = data.get("client_email") or user.email
        else:
            data["created_by_role"] = data.get("created_by_role") or "client"

        booking_id = booking_queries.create_booking(db, data)
    return ApiResponse(data=IdOut(id=booking_id))


@router.put("/{booking_id}", response_model=ApiResponse[BookingOut])
def update_booking(
    booking_id: str,
    body: BookingUpdate,
    db: Session = Depends(get_db),
    _user=Depends(require_roles("owner", "employee")),
):
    updates = updates_from(body)
    if updates.get("status") == "cancelled":
        raise HTTPException(status_code=400, detail="Use POST /api/bookings/{id}/cancel to cancel a booking")
    if updates.get("status") == "completed":
        updates["completed_at"] = utcnow()

    with downstream(db, "update booking"):
        booking = booking_queries.update_booking(db, booking_id, updates)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return ApiResponse(data=BookingOut.model_validate(booking))


@router.delete("/{booking_id}", response_model=ApiResponse[None])
def delete_booking(
    booking_id: str,
    db: Session = Depends(get_db),
    _owner=Depends(require_roles("owner")),
):
    with downstream(db, "delete booking"):
        deleted = booking_queries.delete_booking(db, booking_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Booking not found")
    return ApiResponse(data=None)


@router.post("/{booking_id}/cancel", response_model=ApiResponse[CancelOut])
def cancel_booking(
    booking_id: str,
    body: Optional[CancelPayload] = None,
    db: Session = Depends(get_db),
    user: Optional[User] = Depends(get_optional_user),
):
    """
    Staff may cancel at any time. Clients and anonymous callers must cancel
    at least MIN_CANCEL_HOURS before the appointment.
    """
    with downstream(db, "cancel booking"):
        booking = booking_queries.get_booking(db, booking_id)
        if not booking:
            raise HTTPException(status_code=404, detail="Booking not found")
        if booking.status == "cancelled":
            raise HTTPException(status_code=400, detail="Booking is already cancelled")

        hours = hours_until(booking.booking_date, booking.booking_time)
        is_staff = user is not None and user.role in ("owner", "employee")
        if not is_staff and hours < MIN_CANCEL_HOURS:
            raise HTTPException(
                status_code=403,
                detail=f"Bookings can only be cancelled at least {MIN_CANCEL_HOURS} hours in advance",
            )

        updates = {"status": "cancelled", "cancelled_at": utcnow()}
        if body and body.reason:
            note = f"Cancelled: {body.reason}"
            updates["notes"] = f"{booking.notes}\n{note}" if booking.notes else note
        booking_queries.update_booking(db, booking_id, updates)

    logger.info(f"Booking {booking_id} cancelled ({hours:.1f}h before start)")
    return ApiResponse(data=CancelOut(id=booking_id, hours_until=round(hours, 2)))
