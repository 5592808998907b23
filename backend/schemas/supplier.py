# backend/schemas/supplier.py
from datetime import datetime
from pydantic import EmailStr, Field, field_validator
from typing import Literal, Optional

from schemas.common import CamelModel

SupplierStatus = Literal["active", "inactive"]


# Blank form fields arrive as ""
def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Shared base attributes for supplier entities
class SupplierBase(CamelModel):
    name: str = Field(min_length=1)
    contact_person: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    payment_terms: Optional[str] = None
    status: SupplierStatus = "active"

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        return _blank_to_none(value)


class SupplierCreate(SupplierBase):
    pass


# Schema for partial supplier updates
class SupplierUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    contact_person: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    payment_terms: Optional[str] = None
    status: Optional[SupplierStatus] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        return _blank_to_none(value)


class Supplier(SupplierBase):
    id: str
    created_at: datetime
