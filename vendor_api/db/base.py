"""Vendor store construction and FastAPI dependency."""

import logging
from datetime import datetime, timezone

from fastapi import Request

from vendor_api.core.config import Settings
from vendor_api.domain.vendor import Vendor
from vendor_api.repositories.vendor import VendorRepository

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Sample data (SEED_SAMPLE_DATA=true)
# ---------------------------------------------------------------------------
SAMPLE_VENDORS: tuple[Vendor, ...] = (
    Vendor(
        id=1,
        name="Acme Office Supplies",
        category="Office Supplies",
        contact_email="sales@acme-office.example.com",
        phone_number="555-010-1000",
        address="100 Market St, Springfield",
        created_at=datetime(2025, 6, 21, 12, 0, tzinfo=timezone.utc),
        user_id=1,
        org_id=1,
    ),
    Vendor(
        id=2,
        name="Brightline IT Services",
        category="IT Services",
        contact_email="support@brightline.example.com",
        phone_number="555-010-2000",
        address="42 Circuit Ave, Springfield",
        created_at=datetime(2025, 6, 21, 12, 30, tzinfo=timezone.utc),
        user_id=1,
        org_id=1,
    ),
    Vendor(
        id=3,
        name="Northwind Catering",
        category="Catering",
        contact_email="events@northwind.example.com",
        phone_number="555-010-3000",
        address="7 Harbor Rd, Shelbyville",
        created_at=datetime(2025, 6, 21, 13, 0, tzinfo=timezone.utc),
        user_id=2,
        org_id=2,
    ),
)

# ---------------------------------------------------------------------------
# Store factory
# ---------------------------------------------------------------------------
def create_store(settings: Settings) -> VendorRepository:
    """Build the application's vendor store. Contents live only as long as the process."""
    if settings.seed_sample_data:
        logger.info("Seeding vendor store with %d sample vendors", len(SAMPLE_VENDORS))
        return VendorRepository(SAMPLE_VENDORS)
    return VendorRepository()

# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------
def get_store(request: Request) -> VendorRepository:
    """Return the vendor store attached to the running application."""
    return request.app.state.vendor_store
