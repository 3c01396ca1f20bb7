"""Standardized JSON response envelope helpers."""


from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Single-item response envelope: `{ success: true, data: {...} }`"""

    success: bool = True
    data: T


class ListResponse(BaseModel, Generic[T]):
    """List response envelope: `{ success: true, count: n, data: [...] }`"""

    success: bool = True
    count: int
    data: list[T]


class MessageResponse(BaseModel):
    """Acknowledgement envelope: `{ success: true, message: "...", data: {} }`"""

    success: bool = True
    message: str
    data: dict = Field(default_factory=dict)


def listed(items: list) -> dict:
    """Build a list response dict for use with ListResponse."""
    return {
        "success": True,
        "count": len(items),
        "data": items,
    }
