# salon_backend/queries/availability_queries.py
from typing import Any, Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from salon_backend.models.availability_model import Availability
from salon_backend.models.blocked_slot_model import BlockedSlot
from salon_backend.queries._helpers import apply_updates


def _week_order(a: Availability) -> int:
    # Monday first, Sunday last
    return (a.day_of_week + 6) % 7


# ---------- weekly availability ----------
def get_availability(
    db: Session, employee_id: str, service_id: Optional[str] = None
) -> List[Availability]:
    """Windows of an employee; with a service id, generic windows are kept too."""
    q = db.query(Availability).filter(Availability.employee_id == employee_id)
    if service_id:
        q = q.filter(or_(Availability.service_id.is_(None), Availability.service_id == service_id))
    rows = q.order_by(Availability.start_time, Availability.id).all()
    return sorted(rows, key=_week_order)


def get_availability_entry(db: Session, availability_id: str) -> Optional[Availability]:
    return db.get(Availability, availability_id)


def create_availability(db: Session, data: Dict[str, Any]) -> str:
    entry = Availability()
    apply_updates(entry, data, stamp=False)
    db.add(entry)
    db.commit()
    return entry.id


def update_availability(
    db: Session, availability_id: str, updates: Dict[str, Any]
) -> Optional[Availability]:
    entry = db.get(Availability, availability_id)
    if not entry:
        return None
    apply_updates(entry, updates)
    db.commit()
    db.refresh(entry)
    return entry


def delete_availability(db: Session, availability_id: str) -> bool:
    entry = db.get(Availability, availability_id)
    if not entry:
        return False
    db.delete(entry)
    db.commit()
    return True


# ---------- blocked slots ----------
def get_blocked_slots(
    db: Session,
    employee_id: str,
    service_id: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> List[BlockedSlot]:
    q = db.query(BlockedSlot).filter(BlockedSlot.employee_id == employee_id)
    if service_id:
        q = q.filter(or_(BlockedSlot.service_id.is_(None), BlockedSlot.service_id == service_id))
    if start_date:
        q = q.filter(BlockedSlot.date >= start_date)
    if end_date:
        q = q.filter(BlockedSlot.date <= end_date)
    return q.order_by(BlockedSlot.date, BlockedSlot.start_time).all()


def create_blocked_slot(db: Session, data: Dict[str, Any]) -> str:
    slot = BlockedSlot()
    apply_updates(slot, data, stamp=False)
    db.add(slot)
    db.commit()
    return slot.id


def delete_blocked_slot(db: Session, blocked_slot_id: str) -> bool:
    slot = db.get(BlockedSlot, blocked_slot_id)
    if not slot:
        return False
    db.delete(slot)
    db.commit()
    return True
