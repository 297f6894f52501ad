"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from addrspec.core.logging import LogLevel, setup_logging
from addrspec.grammar.domain.options import Options


class Settings(BaseSettings):
    """Settings loaded from ``ADDRSPEC_*`` environment variables.

    The grammar engine never reads these itself; callers that want an
    environment-driven policy build one with `to_options`.
    """

    model_config = SettingsConfigDict(
        env_prefix="ADDRSPEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: LogLevel = Field(default="INFO")

    # Validation policy defaults
    minimum_sub_domains: int = Field(default=1, ge=0)
    allow_domain_literal: bool = Field(default=True)
    allow_quoted_local_part: bool = Field(default=True)
    allow_display_text: bool = Field(default=False)
    allow_unicode: bool = Field(default=True)

    def to_options(self) -> Options:
        """Build the validation Options described by these settings."""
        return Options(
            minimum_sub_domains=self.minimum_sub_domains,
            allow_domain_literal=self.allow_domain_literal,
            allow_quoted_local_part=self.allow_quoted_local_part,
            allow_display_text=self.allow_display_text,
            allow_unicode=self.allow_unicode,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Send addrspec log records to stdout at the configured level.

    Args:
        settings: Settings to read ``log_level`` from (default: the cached
            settings from `get_settings`).
    """
    setup_logging((settings or get_settings()).log_level)
