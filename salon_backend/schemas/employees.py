# salon_backend/schemas/employees.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from salon_backend.schemas.common import CamelModel, IdStr, NameStr, reject_null

EmployeeStatus = Literal["active", "inactive"]


class EmployeeCreate(CamelModel):
    first_name: NameStr
    last_name: NameStr
    email: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    position: Optional[str] = None
    commission: Optional[float] = Field(default=None, ge=0, le=100)
    user_id: Optional[IdStr] = None
    salon_id: Optional[IdStr] = None
    status: EmployeeStatus = "active"


class EmployeeUpdate(CamelModel):
    first_name: Optional[NameStr] = None
    last_name: Optional[NameStr] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    position: Optional[str] = None
    commission: Optional[float] = Field(default=None, ge=0, le=100)
    user_id: Optional[IdStr] = None
    salon_id: Optional[IdStr] = None
    status: Optional[EmployeeStatus] = None

    @field_validator("first_name", "last_name", "salon_id", "status", mode="before")
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)


class EmployeeOut(CamelModel):
    id: str
    user_id: Optional[str] = None
    salon_id: str
    first_name: str
    last_name: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    position: Optional[str] = None
    commission: Optional[float] = None
    status: EmployeeStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
