"""Shared fixtures: settings, a seeded vendor store, token factory and HTTP client."""

from __future__ import annotations

from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from vendor_api.core.config import Settings
from vendor_api.core.security import create_access_token
from vendor_api.db.base import SAMPLE_VENDORS
from vendor_api.main import create_app
from vendor_api.repositories.vendor import VendorRepository

TEST_SECRET = "test-secret-key"


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known signing secret and sample data enabled."""
    return Settings(
        app_env="test",
        jwt_secret=TEST_SECRET,
        seed_sample_data=True,
    )


@pytest.fixture
def seeded_store() -> VendorRepository:
    """Store holding three vendors: ids 1, 2 owned by (1, 1) and id 3 owned by (2, 2)."""
    return VendorRepository(SAMPLE_VENDORS)


@pytest.fixture
def empty_store() -> VendorRepository:
    return VendorRepository()


@pytest.fixture
def make_token(test_settings: Settings) -> Callable[..., str]:
    """Return a factory signing ``{"user": {...}}`` tokens with the test secret."""

    def _make(user_id: int = 1, org_id: int | None = 1, **extra: Any) -> str:
        return create_access_token({"id": user_id, "org_id": org_id, **extra}, test_settings)

    return _make


@pytest.fixture
def auth_header(make_token: Callable[..., str]) -> Callable[..., dict[str, str]]:
    def _header(user_id: int = 1, org_id: int | None = 1) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(user_id, org_id)}"}

    return _header


@pytest.fixture
def app(test_settings: Settings):
    return create_app(test_settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
