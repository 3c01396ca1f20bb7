"""Reusable behaviour shared by stored records."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """Records carrying a created_at that is set once and never rewritten."""

    IMMUTABLE_FIELDS: frozenset[str] = frozenset({"id", "created_at"})

    @staticmethod
    def now() -> datetime:
        return _now()


class OwnershipMixin:
    """Records scoped to an optional (user_id, org_id) owner.

    ``None`` for a filter argument means "no constraint"; ``None`` on the
    record means "unowned".
    """

    OWNER_FIELDS: frozenset[str] = frozenset({"user_id", "org_id"})

    user_id: Optional[int]
    org_id: Optional[int]

    def is_visible_to(self, user_id: Optional[int] = None, org_id: Optional[int] = None) -> bool:
        if user_id is not None and self.user_id != user_id:
            return False
        if org_id is not None and self.org_id != org_id:
            return False
        return True
