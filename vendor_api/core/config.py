
import logging
from functools import cached_property

from pydantic import Field
from pydantic_settings import BaseSettings

from vendor_api.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Used only when JWT_SECRET is unset outside production. Never deploy with it.
INSECURE_DEV_SECRET = "insecure-dev-secret-change-me"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = Field(default="Vendor Management API", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    app_version: str = "1.0.0"
    frontend_url: str = Field(default="http://localhost:3000", alias="FRONTEND_URL")

    # Bearer token verification
    jwt_secret: str | None = Field(default=None, alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expires_minutes: int = Field(
        default=60 * 24, alias="JWT_EXPIRES_MINUTES",
    )  # issued tokens are valid for one day

    # Preload a handful of vendors across two tenants (local demos only)
    seed_sample_data: bool = Field(default=False, alias="SEED_SAMPLE_DATA")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @cached_property
    def signing_secret(self) -> str:
        """Secret used to sign and verify bearer tokens.

        Falls back to INSECURE_DEV_SECRET outside production; refuses to run in
        production without an explicit JWT_SECRET.
        """
        if self.jwt_secret:
            return self.jwt_secret
        if self.is_production:
            raise ConfigurationError("JWT_SECRET must be set when APP_ENV=production")
        logger.warning(
            "JWT_SECRET is not set; using the insecure development secret. "
            "Tokens signed with it are NOT safe outside local development."
        )
        return INSECURE_DEV_SECRET


settings = Settings()
