"""Vendor CRUD router.

Pattern:
  1. Inject the vendor store + the caller's optional identity via Depends
  2. Instantiate the service with (store, identity)
  3. Call service methods and wrap the result in the response envelope
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status

from vendor_api.core.response import DataResponse, ListResponse, MessageResponse, listed
from vendor_api.db.base import get_store
from vendor_api.domain.identity import Identity
from vendor_api.middleware.identity import get_current_identity
from vendor_api.repositories.vendor import VendorRepository
from vendor_api.schemas.vendor import VendorCreate, VendorOut, VendorUpdate
from vendor_api.services.vendor import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])


# ------------------------------------------------------------------
# Helper: instantiate service with store + caller identity
# ------------------------------------------------------------------

def _svc(
    store: VendorRepository = Depends(get_store),
    identity: Optional[Identity] = Depends(get_current_identity),
) -> VendorService:
    return VendorService(store, identity)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[VendorOut])
async def list_vendors(svc: VendorService = Depends(_svc)):
    """List vendors visible to the caller, newest first."""
    vendors = svc.list_vendors()
    return listed([VendorOut.model_validate(v) for v in vendors])


@router.post("", response_model=DataResponse[VendorOut], status_code=status.HTTP_201_CREATED)
async def create_vendor(
    body: VendorCreate,
    svc: VendorService = Depends(_svc),
):
    """Create a vendor owned by the caller (unowned for anonymous callers)."""
    vendor = svc.create_vendor(body)
    return {"success": True, "data": VendorOut.model_validate(vendor)}


@router.get("/{vendor_id}", response_model=DataResponse[VendorOut])
async def get_vendor(
    vendor_id: int,
    svc: VendorService = Depends(_svc),
):
    vendor = svc.get_vendor(vendor_id)
    return {"success": True, "data": VendorOut.model_validate(vendor)}


@router.put("/{vendor_id}", response_model=DataResponse[VendorOut])
async def update_vendor(
    vendor_id: int,
    body: VendorUpdate,
    svc: VendorService = Depends(_svc),
):
    vendor = svc.update_vendor(vendor_id, body)
    return {"success": True, "data": VendorOut.model_validate(vendor)}


@router.delete("/{vendor_id}", response_model=MessageResponse)
async def delete_vendor(
    vendor_id: int,
    svc: VendorService = Depends(_svc),
):
    svc.delete_vendor(vendor_id)
    return MessageResponse(message="Vendor deleted successfully")
