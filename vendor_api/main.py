"""Vendor Management API: FastAPI application factory."""


import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vendor_api.core.config import Settings, settings as default_settings
from vendor_api.core.exceptions import register_exception_handlers
from vendor_api.db.base import create_store
from vendor_api.middleware.identity import IdentityMiddleware
from vendor_api.routers.vendors import router as vendors_router
from vendor_api.schemas.common import HealthResponse, RootResponse


def _configure_logging(settings: Settings) -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_app(settings: Settings = default_settings) -> FastAPI:
    _configure_logging(settings)

    # Fail closed: a production deploy without JWT_SECRET never starts.
    _ = settings.signing_secret

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc" if settings.app_env == "development" else None,
    )

    # --- Vendor store (process-local, one per app) ---
    app.state.vendor_store = create_store(settings)

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Optional bearer-token identity ---
    app.add_middleware(IdentityMiddleware, settings=settings)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- API routes (/api/*) ---
    app.include_router(vendors_router, prefix="/api")

    @app.get("/", response_model=RootResponse, tags=["Health"])
    async def root():
        return RootResponse(
            message=settings.app_name,
            version=settings.app_version,
            documentation="/docs",
        )

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
