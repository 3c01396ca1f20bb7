"""Shared Pydantic schema base.

Field names stay snake_case on the wire (``contact_email``, ``user_id``), the
format existing API clients already consume.
"""

from __future__ import annotations

from pydantic import BaseModel


class APIModel(BaseModel):
    """All API schemas inherit from this so they can be built from domain records."""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str


class RootResponse(BaseModel):
    message: str
    version: str
    documentation: str
