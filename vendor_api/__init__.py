"""Vendor Management API: tenant-scoped vendor CRUD with optional bearer-token identity."""
