"""Environment-driven application configuration."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .ai.config import DEFAULT_MODEL, validate_model_string

ENV_PREFIX = "LIGHTNING_ISSUES_"


class AppConfig(BaseModel):
    """Runtime settings for generation and history storage."""

    model: str = Field(default=DEFAULT_MODEL, description="AI model to use")
    data_dir: Path = Field(default=Path("data"), description="History directory")
    timeout: float | None = Field(
        default=None, gt=0, description="Seconds to wait for the model"
    )
    max_attempts: int = Field(default=1, ge=1, description="Model call attempts")
    retry_backoff: float = Field(
        default=1.0, ge=0, description="Initial delay between attempts in seconds"
    )

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str) -> str:
        validate_model_string(v)
        return v

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build configuration from ``LIGHTNING_ISSUES_*`` environment variables.

        Unset variables fall back to the field defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        values: dict[str, str] = {}
        for field_name in cls.model_fields:
            value = os.getenv(f"{ENV_PREFIX}{field_name.upper()}")
            if value:
                values[field_name] = value
        return cls.model_validate(values)
