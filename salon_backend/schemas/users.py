# salon_backend/schemas/users.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, constr

from salon_backend.schemas.common import CamelModel

Role = Literal["owner", "employee", "client"]
Password = constr(min_length=6, max_length=128)
Phone = constr(strip_whitespace=True, max_length=32)


class LoginPayload(CamelModel):
    # presence is checked in the handler so empty strings get the same 400
    email: Optional[str] = None
    password: Optional[str] = None


class RegisterPayload(CamelModel):
    email: EmailStr
    password: Password
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[Phone] = None


class UserCreate(RegisterPayload):
    role: Role


class ChangePasswordPayload(CamelModel):
    new_password: Password


class UserOut(CamelModel):
    id: str
    email: str
    role: Role
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    must_change_password: bool = False
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SessionUserOut(UserOut):
    """A user as returned by login/register, carrying the provider's token."""
    id_token: Optional[str] = None
