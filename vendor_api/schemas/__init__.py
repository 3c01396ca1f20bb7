"""Pydantic schemas package.

Folder intent:
  common.py  — APIModel base + HealthResponse / RootResponse
  vendor.py  — Vendor request DTOs, response model and response envelopes
"""
