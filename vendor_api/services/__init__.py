"""Services package — all business logic lives here, never in routers.

Files:
  vendor.py  — VendorService: identity-scoped vendor operations

Rule: routers call services, services call the store.
      No store access in routers. No FastAPI imports in services.
"""
