# salon_backend/schemas/common.py
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, constr
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# field types shared by several payloads
IdStr = constr(strip_whitespace=True, min_length=1, max_length=128)
TimeStr = constr(strip_whitespace=True, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")     # HH:MM
DateStr = constr(strip_whitespace=True, pattern=r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$")  # YYYY-MM-DD
NameStr = constr(strip_whitespace=True, min_length=1, max_length=200)


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; reads ORM objects directly."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope. Failures are written by the error handlers as {success, error}."""
    success: bool = True
    data: Optional[T] = None


class IdOut(CamelModel):
    id: str


def reject_null(value):
    """Partial updates may omit a required column but never set it to null."""
    if value is None:
        raise ValueError("must not be null")
    return value


def updates_from(body: BaseModel) -> dict:
    """Only the fields the client actually sent, keyed by attribute name."""
    return body.model_dump(exclude_unset=True)
