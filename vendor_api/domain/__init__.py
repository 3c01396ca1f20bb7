"""Domain package — plain record types shared by the store, services and routers.

Folder intent:
  vendor.py    — Vendor record (the only stored entity)
  identity.py  — Per-request identity resolved from the bearer token (never stored)
"""

from vendor_api.domain.identity import Identity
from vendor_api.domain.vendor import Vendor

__all__ = [
    "Identity",
    "Vendor",
]
