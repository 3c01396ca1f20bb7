"""Vendor Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from vendor_api.schemas.common import APIModel

class VendorCreate(APIModel):
    # Optional at the schema level so a missing name/category is reported as
    # the API's 400 "name and category" error rather than a generic one.
    name: str | None = None
    category: str | None = None
    contact_email: str | None = None
    phone_number: str | None = None
    address: str | None = None

class VendorUpdate(APIModel):
    name: str | None = None
    category: str | None = None
    contact_email: str | None = None
    phone_number: str | None = None
    address: str | None = None

class VendorOut(APIModel):
    id: int
    name: str
    category: str
    contact_email: str | None = None
    phone_number: str | None = None
    address: str | None = None
    created_at: datetime
    user_id: int | None = None
    org_id: int | None = None

