"""Application settings using pydantic-settings."""

from functools import cache
from typing import Annotated, Literal

from pydantic import BeforeValidator, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from albumsync.config import DEFAULT_API_URL, ClientConfig

LogLevel = Annotated[
    Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    BeforeValidator(lambda v: v.upper() if isinstance(v, str) else v),
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ALBUMSYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_url: str = Field(
        default=DEFAULT_API_URL, description="Catalog service base address"
    )
    timeout: float = Field(default=10.0, gt=0, description="Request timeout (s)")
    log_level: LogLevel = Field(default="WARNING", description="Log level")

    @field_validator("api_url")
    @classmethod
    def normalize_api_url(cls, v: str) -> str:
        """Require an http(s) address and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid API URL: {v}")
        return v.rstrip("/")

    def client_config(self) -> ClientConfig:
        return ClientConfig(base_url=self.api_url, timeout=self.timeout)


@cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
