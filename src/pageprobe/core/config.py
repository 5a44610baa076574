"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Self

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pageprobe.probe.models import (
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_PATH,
    DEFAULT_BASE_URL,
    DEFAULT_OUTPUT_DIR,
    ProbeConfig,
    ScreenshotConfig,
    SettleStrategy,
)


class Settings(BaseSettings):
    """Probe settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAGEPROBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    environment: str = "development"
    log_level: Literal["trace", "debug", "info", "notice", "warn", "error", "fatal"] = "info"

    # Target
    base_url: str = DEFAULT_BASE_URL
    admin_path: str = DEFAULT_ADMIN_PATH
    admin_password: str = Field(
        default=DEFAULT_ADMIN_PASSWORD,
        validation_alias=AliasChoices("PAGEPROBE_ADMIN_PASSWORD", "VITE_ADMIN_PASSWORD"),
        description="Password submitted to the admin password prompt.",
    )

    # Artifacts
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)

    # Browser
    headless: bool = True
    viewport_width: int = 1280
    viewport_height: int = 720
    navigation_timeout_ms: int = 30000

    # Behaviour
    settle_strategy: SettleStrategy = SettleStrategy.DELAY
    settle_delay_ms: int = Field(default=3000, ge=0)
    settle_timeout_ms: int = Field(default=10000, gt=0)
    require_password: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept upper-case and Python-style level names such as INFO or WARNING."""
        if isinstance(value, str):
            value = value.lower()
            return "warn" if value == "warning" else value
        return value

    @model_validator(mode="after")
    def validate_base_url(self) -> Self:
        """Ensure base_url is an absolute http(s) URL."""
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got {self.base_url!r}")
        return self

    def to_probe_config(self) -> ProbeConfig:
        """Build the probe configuration from these settings."""
        return ProbeConfig(
            base_url=self.base_url,
            admin_path=self.admin_path,
            password=self.admin_password,
            screenshot=ScreenshotConfig(output_dir=self.output_dir),
            settle_strategy=self.settle_strategy,
            settle_delay_ms=self.settle_delay_ms,
            settle_timeout_ms=self.settle_timeout_ms,
            require_password=self.require_password,
            viewport_width=self.viewport_width,
            viewport_height=self.viewport_height,
            navigation_timeout_ms=self.navigation_timeout_ms,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
