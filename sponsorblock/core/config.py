"""Configuration for the SponsorBlock client."""

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from sponsorblock.core.constants import (
    BASE_URL_MAIN,
    DEFAULT_HASH_PREFIX_LENGTH,
    DEFAULT_SERVICE,
    DEFAULT_USER_AGENT,
    MAX_HASH_PREFIX_LENGTH,
    MIN_HASH_PREFIX_LENGTH,
)


class ClientConfig(BaseModel):
    """Client-wide settings, fixed at construction.

    The local user ID works like a password: it is stored as a ``SecretStr``
    so it never shows up in reprs or logs.
    """

    model_config = ConfigDict(frozen=True)

    # Identity
    user_id: SecretStr

    # API
    base_url: str = BASE_URL_MAIN
    service: str = DEFAULT_SERVICE
    hash_prefix_length: int = Field(
        DEFAULT_HASH_PREFIX_LENGTH,
        ge=MIN_HASH_PREFIX_LENGTH,
        le=MAX_HASH_PREFIX_LENGTH,
    )

    # HTTP
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float | None = Field(None, gt=0)  # seconds, None = no timeout

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the base URL without a trailing slash."""
        return v.rstrip("/")

    def endpoint_url(self, path: str) -> str:
        """
        Build the absolute URL for an API path.

        Args:
            path: Endpoint path relative to the base URL (e.g. "/status")

        Returns:
            Absolute URL
        """
        return f"{self.base_url}/{path.lstrip('/')}"
