"""Store package — builds the process-local vendor store and exposes it to routes."""
from vendor_api.db.base import create_store, get_store

__all__ = ["create_store", "get_store"]
