"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from youtube_cli.config.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class Profile(BaseModel):
    """A named API profile holding the credential used for every request."""

    name: str
    api_key: str | None = Field(default=None, description="YouTube Data API key")
    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="API root, e.g. https://www.googleapis.com/youtube/v3",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def key_configured(self) -> bool:
        return bool(self.api_key)


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    profiles: dict[str, Profile] = Field(default_factory=dict)
