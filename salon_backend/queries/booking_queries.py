# salon_backend/queries/booking_queries.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from salon_backend.models.booking_model import Booking
from salon_backend.queries._helpers import apply_updates

logger = logging.getLogger(__name__)


def get_bookings(
    db: Session,
    salon_id: Optional[str] = None,
    employee_id: Optional[str] = None,
    status: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    client_email: Optional[str] = None,
) -> List[Booking]:
    q = db.query(Booking)
    if salon_id:
        q = q.filter(Booking.salon_id == salon_id)
    if employee_id:
        q = q.filter(Booking.employee_id == employee_id)
    if status:
        q = q.filter(Booking.status == status)
    if start_date:
        q = q.filter(Booking.booking_date >= start_date)
    if end_date:
        q = q.filter(Booking.booking_date <= end_date)
    if client_email:
        q = q.filter(Booking.client_email == client_email)
    return q.order_by(Booking.booking_date.desc(), Booking.booking_time.desc()).all()


def get_booking(db: Session, booking_id: str) -> Optional[Booking]:
    return db.get(Booking, booking_id)


def create_booking(db: Session, data: Dict[str, Any]) -> str:
    booking = Booking()
    apply_updates(booking, data, stamp=False)
    db.add(booking)
    db.commit()
    logger.info(
        "Booking %s created for employee %s on %s %s",
        booking.id, booking.employee_id, booking.booking_date, booking.booking_time,
    )
    return booking.id


def update_booking(db: Session, booking_id: str, updates: Dict[str, Any]) -> Optional[Booking]:
    booking = db.get(Booking, booking_id)
    if not booking:
        return None
    apply_updates(booking, updates)
    db.commit()
    db.refresh(booking)
    return booking


def delete_booking(db: Session, booking_id: str) -> bool:
    booking = db.get(Booking, booking_id)
    if not booking:
        return False
    db.delete(booking)
    db.commit()
    return True
