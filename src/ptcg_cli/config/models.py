"""Pydantic models for CLI configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ptcg_cli.config.constants import DEFAULT_API_URL, DEFAULT_TIMEOUT


class ApiProfile(BaseModel):
    """A named API connection profile."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str = Field(
        default=DEFAULT_API_URL,
        description="API base URL, e.g. https://api.pokemontcg.io/v2",
    )
    api_key: str | None = Field(default=None, description="Value sent as X-Api-Key")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str | None) -> str | None:
        if v is not None and not v.isprintable():
            raise ValueError("API key must not contain control characters")
        return v

    @property
    def auth_configured(self) -> bool:
        return self.api_key is not None


class CLIConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(validate_assignment=True)

    default_profile: str | None = None
    default_format: Literal["table", "json", "yaml", "csv"] = "table"
    profiles: dict[str, ApiProfile] = Field(default_factory=dict)
