"""Identity middleware: attaches the caller's optional Identity to every request."""

import logging
from collections.abc import Callable
from typing import Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from vendor_api.core.config import Settings
from vendor_api.core.exceptions import error_body
from vendor_api.core.security import resolve_identity
from vendor_api.domain.identity import Identity

logger = logging.getLogger(__name__)


class IdentityMiddleware(BaseHTTPMiddleware):
    """Sets ``request.state.identity`` to an Identity or None.

    Optional auth: requests with no token or a bad token continue as
    anonymous and are never rejected here. Only an unexpected fault while
    resolving ends the request, with a 500.
    """

    def __init__(self, app, settings: Settings):
        super().__init__(app)
        self._settings = settings

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            authorization = request.headers.get("Authorization")
            request.state.identity = resolve_identity(authorization, self._settings)
        except Exception:
            logger.exception("Failed to resolve request identity")
            return JSONResponse(status_code=500, content=error_body("Server Error"))

        return await call_next(request)


def get_current_identity(request: Request) -> Optional[Identity]:
    """FastAPI dependency: the Identity set by IdentityMiddleware, or None."""
    return getattr(request.state, "identity", None)
