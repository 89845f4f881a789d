"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Onboarding settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # Public suffix list
    # The bundled snapshot is used unless a refresh from publicsuffix.org is allowed
    psl_fetch_remote: bool = False
    psl_cache_dir: str | None = Field(
        default=None,
        description="Directory where tldextract caches a downloaded suffix list.",
    )

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings for security requirements."""
        # Debug logging writes user emails verbatim
        if self.environment == "production" and self.debug:
            raise ValueError(
                "DEBUG mode cannot be enabled in production environment. "
                "This would write unredacted user emails to the logs."
            )
        if self.psl_cache_dir is not None and not self.psl_fetch_remote:
            raise ValueError("PSL_CACHE_DIR is only used when PSL_FETCH_REMOTE is enabled")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
