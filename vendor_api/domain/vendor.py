"""Vendor record as held by the in-memory store.

Records are immutable snapshots: the store swaps in a new instance on update,
so a Vendor handed to a caller never changes underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from vendor_api.domain.mixins import OwnershipMixin, TimestampMixin


@dataclass(frozen=True)
class Vendor(OwnershipMixin, TimestampMixin):
    id: int
    name: str
    category: str
    created_at: datetime
    contact_email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    user_id: Optional[int] = None
    org_id: Optional[int] = None
