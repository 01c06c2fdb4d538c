# salon_backend/schemas/bookings.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import field_validator

from salon_backend.schemas.common import CamelModel, DateStr, IdStr, NameStr, TimeStr, reject_null
from salon_backend.schemas.users import Role

BookingStatus = Literal["pending", "confirmed", "completed", "cancelled", "no-show"]


class BookingCreate(CamelModel):
    employee_id: IdStr
    service_id: IdStr
    booking_date: DateStr
    booking_time: TimeStr
    client_name: NameStr
    client_email: Optional[str] = None
    client_phone: Optional[str] = None
    client_id: Optional[IdStr] = None
    status: BookingStatus = "pending"
    notes: Optional[str] = None
    created_by_role: Optional[Role] = None
    created_by_name: Optional[str] = None
    created_by_user_id: Optional[str] = None


class BookingUpdate(CamelModel):
    employee_id: Optional[IdStr] = None
    service_id: Optional[IdStr] = None
    booking_date: Optional[DateStr] = None
    booking_time: Optional[TimeStr] = None
    client_name: Optional[NameStr] = None
    client_email: Optional[str] = None
    client_phone: Optional[str] = None
    client_id: Optional[IdStr] = None
    status: Optional[BookingStatus] = None
    notes: Optional[str] = None

    @field_validator(
        "employee_id", "service_id", "booking_date", "booking_time", "client_name", "status",
        mode="before",
    )
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)


class BookingOut(CamelModel):
    id: str
    salon_id: str
    employee_id: str
    service_id: str
    client_id: Optional[str] = None
    client_name: str
    client_email: Optional[str] = None
    client_phone: Optional[str] = None
    booking_date: str
    booking_time: str
    status: BookingStatus
    created_by_role: Optional[str] = None
    created_by_name: Optional[str] = None
    created_by_user_id: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class CancelPayload(CamelModel):
    reason: Optional[str] = None


class CancelOut(CamelModel):
    id: str
    hours_until: float
