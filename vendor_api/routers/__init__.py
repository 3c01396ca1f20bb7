"""Routers package — HTTP endpoint definitions.

Files:
  vendors.py  — Vendor CRUD routes (/api/vendors/*)

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to vendor_api/services/.
"""
