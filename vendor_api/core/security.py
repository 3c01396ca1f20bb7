"""Bearer token issuing and verification (HS256 JWT via python-jose).

Authentication is optional for this API: a missing, malformed, tampered or
expired token resolves to an anonymous caller instead of an error. Only an
unexpected fault while reading the request is treated as a failure, and that
is handled by the identity middleware.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

from jose import JWTError, jwt

from vendor_api.core.config import Settings, settings as default_settings
from vendor_api.domain.identity import Identity

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

# Only these user attributes are ever embedded in a token.
TOKEN_USER_FIELDS = ("id", "email", "name", "role", "org_id")


def create_access_token(
    user: Mapping[str, Any],
    settings: Settings = default_settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Sign a token carrying ``{"user": {id, email, name, role, org_id}}``.

    Any other attribute of ``user`` (a password hash, for instance) is left out.
    """
    expires_delta = expires_delta or timedelta(minutes=settings.jwt_expires_minutes)
    claims = {
        "user": {field: user.get(field) for field in TOKEN_USER_FIELDS},
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(claims, settings.signing_secret, algorithm=settings.jwt_algorithm)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer <token>`` value, if any."""
    if not authorization:
        return None
    if not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


def resolve_identity(
    authorization: Optional[str],
    settings: Settings = default_settings,
) -> Optional[Identity]:
    """Map a raw Authorization header to an Identity, or None for anonymous."""
    token = extract_bearer_token(authorization)
    if token is None:
        return None

    try:
        claims = jwt.decode(
            token,
            settings.signing_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as exc:
        # Never log the token itself
        logger.debug("Ignoring unusable bearer token: %s", exc)
        return None

    identity = Identity.from_claims(claims)
    if identity is None:
        logger.debug("Bearer token has no user id; treating request as anonymous")
    return identity
