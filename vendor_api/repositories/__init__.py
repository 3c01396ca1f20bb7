"""Repositories package — the only code that touches stored records.

Files:
  base.py    — InMemoryRepository: owner filtering, locking, id allocation
  vendor.py  — VendorRepository: the vendor store
"""
