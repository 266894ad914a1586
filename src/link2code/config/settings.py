"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from link2code.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Settings loaded from ``LINK2CODE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LINK2CODE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    json_logs: bool = False

    # Hosting service; self-hosted instances must share the github.com URL shape
    host: str = "github.com"
    remote_name: str = "origin"

    # Length of the abbreviated commit id in links
    abbrev: int = Field(default=10, ge=4, le=40)

    # Parallel resolution (1 = sequential)
    workers: int = Field(default=1, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises:
        ConfigurationError: If a LINK2CODE_* value is invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        problems = "; ".join(
            f"LINK2CODE_{str(error['loc'][0]).upper()}: {error['msg']}" for error in e.errors()
        )
        raise ConfigurationError(
            f"invalid setting {problems}",
            details={"errors": e.errors(include_url=False)},
        ) from e
