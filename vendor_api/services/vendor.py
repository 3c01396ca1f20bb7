"""Vendor service: applies the caller's identity to every store operation.

Anonymous callers (identity None) work on the whole collection and create
unowned vendors; identified callers only ever see, change or delete vendors
owned by their (user_id, org_id), and everything they create is stamped
with it.

Rule: No FastAPI here. Pure Python business logic.
"""

import logging
from typing import Any, Callable, Optional, TypeVar

from vendor_api.core.exceptions import (
    AppException,
    InternalError,
    NotFoundError,
    ValidationError,
)
from vendor_api.domain.identity import Identity
from vendor_api.domain.vendor import Vendor
from vendor_api.repositories.vendor import REQUIRED_FIELDS_MESSAGE, VendorRepository
from vendor_api.schemas.vendor import VendorCreate, VendorUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T")


class VendorService:
    def __init__(self, store: VendorRepository, identity: Optional[Identity] = None):
        self._store = store
        self._identity = identity

    @property
    def _owner(self) -> dict[str, Optional[int]]:
        if self._identity is None:
            return {"user_id": None, "org_id": None}
        return {"user_id": self._identity.user_id, "org_id": self._identity.org_id}

    def _run(self, action: str, op: Callable[[], T]) -> T:
        """Run a store call, turning unexpected faults into an opaque InternalError."""
        try:
            return op()
        except AppException:
            raise
        except Exception as exc:
            logger.exception("Vendor store failure while %s", action)
            raise InternalError(f"Server error while {action}") from exc

    def list_vendors(self) -> list[Vendor]:
        return self._run("fetching vendors", lambda: self._store.list(**self._owner))

    def get_vendor(self, vendor_id: int) -> Vendor:
        vendor = self._run(
            "fetching vendor", lambda: self._store.get_by_id(vendor_id, **self._owner)
        )
        if vendor is None:
            raise NotFoundError("Vendor not found")
        return vendor

    def create_vendor(self, data: VendorCreate) -> Vendor:
        if not data.name or not data.category:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        payload: dict[str, Any] = data.model_dump(exclude_none=True)
        payload.update(self._owner)
        vendor = self._run("creating vendor", lambda: self._store.create(payload))
        logger.info("Created vendor %s (user_id=%s)", vendor.id, vendor.user_id)
        return vendor

    def update_vendor(self, vendor_id: int, data: VendorUpdate) -> Vendor:
        changes = data.model_dump(exclude_unset=True)
        updated = self._run(
            "updating vendor",
            lambda: self._store.update(vendor_id, changes, **self._owner),
        )
        if updated is None:
            raise NotFoundError("Vendor not found or you do not have permission to update it")
        return updated

    def delete_vendor(self, vendor_id: int) -> Vendor:
        deleted = self._run(
            "deleting vendor", lambda: self._store.delete(vendor_id, **self._owner)
        )
        if deleted is None:
            raise NotFoundError("Vendor not found or you do not have permission to delete it")
        logger.info("Deleted vendor %s", vendor_id)
        return deleted
