"""
Configuration management for the Washerman laundry backend.

Loads settings from .env via pydantic-settings.

Security notes:
    - validate_production_settings() enforces strict CORS in production
    - EXPOSE_ERROR_DETAILS must stay off in production (raw storage errors)
"""
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── Database ────────────────────────────────────────────────────
    database_url: str = "sqlite:///./data/washerman.db"

    # ── Server ──────────────────────────────────────────────────────
    port: int = 3000
    static_dir: str = "public"

    # ── Application ─────────────────────────────────────────────────
    environment: str = "development"

    # ── Passwords ───────────────────────────────────────────────────
    bcrypt_rounds: int = 10

    # ── Errors ──────────────────────────────────────────────────────
    # When True, raw storage error text is returned to clients.
    expose_error_details: bool = False

    # ── CORS ────────────────────────────────────────────────────────
    cors_origins: str = "https://washerman_frontend.onrender.com"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # allow unknown .env keys without crashing
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def validate_production_settings(self):
        """
        Validate settings for production safety.

        Called during app startup.
        """
        if self.environment == "production":
            if "*" in self.cors_origins:
                raise ValueError(
                    "CORS_ORIGINS must not contain '*' in production. "
                    "Set explicit allowed origins."
                )
            if self.expose_error_details:
                raise ValueError(
                    "EXPOSE_ERROR_DETAILS must be false in production. "
                    "Raw storage errors would be sent to clients."
                )
            logger.info("Production settings validated")
        else:
            warnings = []
            if self.expose_error_details:
                warnings.append("EXPOSE_ERROR_DETAILS=true (raw storage errors sent to clients)")
            if "*" in self.cors_origins:
                warnings.append("CORS_ORIGINS contains '*' (open access)")
            if self.bcrypt_rounds < 10:
                warnings.append(f"BCRYPT_ROUNDS={self.bcrypt_rounds} (weaker than default 10)")
            for w in warnings:
                logger.warning(w)


# Global settings instance
settings = Settings()
