"""Unit tests for bearer token issuing and identity resolution.

Authentication is optional: every bad-token case must resolve to an
anonymous caller (None), never to an error.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from vendor_api.core.config import Settings
from vendor_api.core.security import (
    create_access_token,
    extract_bearer_token,
    resolve_identity,
)
from vendor_api.domain.identity import Identity

from tests.conftest import TEST_SECRET


class TestCreateAccessToken:
    """Tests for create_access_token."""

    def test_embeds_public_user_fields_only(self, test_settings: Settings) -> None:
        user = {
            "id": 1,
            "email": "test@example.com",
            "name": "Test User",
            "role": "admin",
            "org_id": 1,
            "password": "should-not-be-included-in-token",
        }

        token = create_access_token(user, test_settings)
        claims = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])

        assert claims["user"] == {
            "id": 1,
            "email": "test@example.com",
            "name": "Test User",
            "role": "admin",
            "org_id": 1,
        }
        assert "password" not in claims["user"]

    def test_missing_user_fields_are_null(self, test_settings: Settings) -> None:
        token = create_access_token({"id": 2, "email": "minimal@example.com"}, test_settings)
        claims = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])

        assert claims["user"] == {
            "id": 2,
            "email": "minimal@example.com",
            "name": None,
            "role": None,
            "org_id": None,
        }

    def test_expires_after_configured_lifetime(self, test_settings: Settings) -> None:
        token = create_access_token({"id": 1}, test_settings)
        claims = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])

        expected = datetime.now(timezone.utc) + timedelta(days=1)
        assert abs(claims["exp"] - expected.timestamp()) < 60


class TestExtractBearerToken:
    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            (None, None),
            ("", None),
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("Bearer   ", None),
            ("Basic dXNlcjpwYXNz", None),
            ("abc.def.ghi", None),
        ],
    )
    def test_extracts_token_only_from_bearer_scheme(self, header, expected) -> None:
        assert extract_bearer_token(header) == expected


class TestResolveIdentity:
    """Tests for resolve_identity."""

    def test_valid_token_yields_identity(self, test_settings: Settings) -> None:
        token = create_access_token(
            {"id": 1, "org_id": 3, "name": "Test User", "email": "t@example.com", "role": "admin"},
            test_settings,
        )

        identity = resolve_identity(f"Bearer {token}", test_settings)

        assert identity == Identity(
            user_id=1, org_id=3, email="t@example.com", name="Test User", role="admin"
        )

    def test_token_without_org_yields_user_only_identity(self, test_settings: Settings) -> None:
        token = jwt.encode({"user": {"id": 1, "name": "Test User"}}, TEST_SECRET, algorithm="HS256")

        identity = resolve_identity(f"Bearer {token}", test_settings)

        assert identity is not None
        assert identity.user_id == 1
        assert identity.org_id is None
        assert identity.name == "Test User"

    def test_missing_header_is_anonymous(self, test_settings: Settings) -> None:
        assert resolve_identity(None, test_settings) is None

    def test_malformed_token_is_anonymous(self, test_settings: Settings) -> None:
        assert resolve_identity("Bearer invalid-token", test_settings) is None

    def test_wrong_secret_is_anonymous(self, test_settings: Settings) -> None:
        token = jwt.encode({"user": {"id": 1, "org_id": 1}}, "some-other-secret", algorithm="HS256")

        assert resolve_identity(f"Bearer {token}", test_settings) is None

    def test_expired_token_is_anonymous(self, test_settings: Settings) -> None:
        token = create_access_token(
            {"id": 1, "org_id": 1}, test_settings, expires_delta=timedelta(minutes=-5)
        )

        assert resolve_identity(f"Bearer {token}", test_settings) is None

    def test_token_without_user_claim_is_anonymous(self, test_settings: Settings) -> None:
        token = jwt.encode({"sub": "1"}, TEST_SECRET, algorithm="HS256")

        assert resolve_identity(f"Bearer {token}", test_settings) is None

    def test_token_with_malformed_user_id_is_anonymous(self, test_settings: Settings) -> None:
        token = jwt.encode({"user": {"id": "--5"}}, TEST_SECRET, algorithm="HS256")

        assert resolve_identity(f"Bearer {token}", test_settings) is None


class TestIdentityFromClaims:
    @pytest.mark.parametrize(
        "claims",
        [
            {},
            {"user": None},
            {"user": "1"},
            {"user": {}},
            {"user": {"id": None}},
            {"user": {"id": True}},
            {"user": {"id": "abc"}},
            {"user": {"id": "--5"}},
            {"user": {"id": "²"}},
        ],
    )
    def test_returns_none_without_usable_user_id(self, claims) -> None:
        assert Identity.from_claims(claims) is None

    def test_accepts_numeric_string_ids(self) -> None:
        identity = Identity.from_claims({"user": {"id": "7", "org_id": "9"}})

        assert identity == Identity(user_id=7, org_id=9)

    def test_zero_is_a_valid_id(self) -> None:
        identity = Identity.from_claims({"user": {"id": 0, "org_id": 0}})

        assert identity == Identity(user_id=0, org_id=0)
