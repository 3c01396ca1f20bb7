"""Vendor repository: the tenant-scoped vendor store.

One instance is built per application (see vendor_api.db.base.create_store)
and shared by every request through ``app.state``.
"""

from typing import Any, Mapping

from vendor_api.core.exceptions import ValidationError
from vendor_api.domain.vendor import Vendor
from vendor_api.repositories.base import InMemoryRepository

REQUIRED_FIELDS_MESSAGE = "Please provide name and category for the vendor"
BLANK_FIELDS_MESSAGE = "Vendor name and category cannot be empty"


class VendorRepository(InMemoryRepository[Vendor]):
    model = Vendor

    def validate_create(self, data: Mapping[str, Any]) -> None:
        # Enforced here as well as in the service so no caller can store a
        # nameless or uncategorised vendor.
        if not _present(data.get("name")) or not _present(data.get("category")):
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    def validate_update(self, changes: Mapping[str, Any]) -> None:
        # Optional fields may be cleared with None; name and category may not.
        for field in ("name", "category"):
            if field in changes and not _present(changes[field]):
                raise ValidationError(BLANK_FIELDS_MESSAGE)


def _present(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())
