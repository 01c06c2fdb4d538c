# salon_backend/schemas/availability.py
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from salon_backend.schemas.common import CamelModel, DateStr, IdStr, TimeStr, reject_null

# index = day number stored in the database (0 = Sunday)
DAY_NAMES = ["sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]


def _normalize_day(value):
    if isinstance(value, str):
        v = value.strip().lower()
        if v in DAY_NAMES:
            return DAY_NAMES.index(v)
        if v.isdigit():
            return int(v)
    return value


class AvailabilityCreate(CamelModel):
    employee_id: IdStr
    day_of_week: int = Field(ge=0, le=6)
    start_time: TimeStr
    end_time: TimeStr
    is_available: bool = True
    service_id: Optional[IdStr] = None
    start_date: Optional[DateStr] = None
    end_date: Optional[DateStr] = None

    @field_validator("day_of_week", mode="before")
    @classmethod
    def day_name_to_number(cls, v):
        return _normalize_day(v)


class AvailabilityUpdate(CamelModel):
    employee_id: Optional[IdStr] = None
    day_of_week: Optional[int] = Field(default=None, ge=0, le=6)
    start_time: Optional[TimeStr] = None
    end_time: Optional[TimeStr] = None
    is_available: Optional[bool] = None
    service_id: Optional[IdStr] = None
    start_date: Optional[DateStr] = None
    end_date: Optional[DateStr] = None

    @field_validator("day_of_week", mode="before")
    @classmethod
    def day_name_to_number(cls, v):
        return _normalize_day(v)

    @field_validator("employee_id", "day_of_week", "start_time", "end_time", "is_available", mode="before")
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)


class AvailabilityOut(CamelModel):
    id: str
    employee_id: str
    service_id: Optional[str] = None
    day_of_week: int
    start_time: str
    end_time: str
    is_available: bool
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BlockedSlotCreate(CamelModel):
    employee_id: IdStr
    date: DateStr
    start_time: TimeStr
    end_time: Optional[TimeStr] = None
    service_id: Optional[IdStr] = None
    reason: Optional[str] = None


class BlockedSlotOut(CamelModel):
    id: str
    employee_id: str
    service_id: Optional[str] = None
    date: str
    start_time: str
    end_time: Optional[str] = None
    reason: Optional[str] = None
    created_at: Optional[datetime] = None


class TimeSlot(CamelModel):
    time: str
    available: bool


class AvailableSlotsOut(CamelModel):
    date: str
    slots: list[TimeSlot] = []
