"""Per-request caller identity.

An Identity only exists for requests that carried a valid bearer token.
Anonymous requests have no Identity at all (``None``), which is distinct from
an identity whose ids happen to be ``0``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Identity:
    user_id: int
    org_id: Optional[int] = None
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> Optional[Identity]:
        """Build an Identity from a decoded ``{"user": {...}}`` token payload.

        Returns None when the payload carries no usable user id.
        """
        user = claims.get("user")
        if not isinstance(user, Mapping):
            return None

        user_id = _as_int(user.get("id"))
        if user_id is None:
            return None

        return cls(
            user_id=user_id,
            org_id=_as_int(user.get("org_id")),
            email=user.get("email"),
            name=user.get("name"),
            role=user.get("role"),
        )


def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass; a token saying {"id": true} is not a user id
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None
