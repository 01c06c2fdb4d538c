# salon_backend/schemas/services.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from salon_backend.schemas.common import CamelModel, IdStr, NameStr, reject_null


class ServiceCreate(CamelModel):
    name: NameStr
    duration: int = Field(gt=0, description="minutes")
    price: float = Field(ge=0)
    description: Optional[str] = None
    category: str = "other"
    is_active: bool = True
    salon_id: Optional[IdStr] = None
    # employees offering the service
    employee_ids: Optional[List[IdStr]] = None


class ServiceUpdate(CamelModel):
    name: Optional[NameStr] = None
    duration: Optional[int] = Field(default=None, gt=0)
    price: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = None
    category: Optional[str] = None
    is_active: Optional[bool] = None
    salon_id: Optional[IdStr] = None
    employee_ids: Optional[List[IdStr]] = None

    @field_validator("name", "duration", "price", "category", "is_active", "salon_id", mode="before")
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)


class ServiceOut(CamelModel):
    id: str
    salon_id: str
    name: str
    description: Optional[str] = None
    duration: int
    price: float
    category: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EmployeeServiceCreate(CamelModel):
    employee_id: IdStr
    service_id: IdStr
    is_offered: bool = True


class EmployeeServiceOut(CamelModel):
    id: str
    employee_id: str
    service_id: str
    is_offered: bool
    created_at: Optional[datetime] = None
