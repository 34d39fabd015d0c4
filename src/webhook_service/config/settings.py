"""Dispatcher settings model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BaseConfig(BaseModel):
    """Base configuration model with common settings."""

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
        frozen=False,
    )


class DispatcherSettings(BaseConfig):
    """Tunable delivery behavior for a ``Dispatcher``."""

    poll_interval: float = Field(
        default=1.0,
        gt=0.0,
        le=60.0,
        description="Seconds between checks while the rate-limit gate is engaged",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0.0,
        le=300.0,
        description="Timeout in seconds for each HTTP request",
    )
    max_retries: int | None = Field(
        default=None,
        ge=0,
        description="Maximum 429 retries per send; None retries without limit",
    )
    per_url_rate_limit: bool = Field(
        default=False,
        description="Gate only the rate-limited webhook URL instead of every send",
    )
    retry_after_header: str = Field(
        default="x-ratelimit-retry-after",
        min_length=1,
        description="Response header carrying the retry delay in seconds",
    )

    @field_validator("retry_after_header")
    @classmethod
    def normalize_header(cls, value: str) -> str:
        """Header lookups are case-insensitive; store the lower-case name."""
        return value.lower()
