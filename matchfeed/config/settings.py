import logging
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOURCE_DOMAINS = [
    "https://www.bayaerial.com/",
    "https://moralheroes.org/",
]


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = Field("Match Feed", description="Service name shown in logs and docs.")
    app_version: str = Field("0.1.0", description="Version reported by /health.")

    # Upstream sources, tried in order on every request
    source_domains: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SOURCE_DOMAINS),
        description="Ordered fallback list of base URLs (JSON array in env).",
    )
    request_timeout: float = Field(
        5.0, gt=0, description="Timeout in seconds for a single source attempt."
    )
    user_agent: str = Field(
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
        description="User-Agent header sent to the sources.",
    )

    # HTTP server
    host: str = Field("0.0.0.0", description="Interface the API binds to.")
    port: int = Field(3000, ge=1, le=65535, description="Port the API listens on.")

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("source_domains")
    @classmethod
    def _ensure_trailing_slash(cls, value: List[str]) -> List[str]:
        # URL templates are appended directly to the base URL
        return [d if d.endswith("/") else d + "/" for d in (v.strip() for v in value) if d]


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
