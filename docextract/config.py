"""
Application configuration loaded from environment variables.
Uses pydantic-settings for typed, validated config.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from docextract.domain.enums import CleanupFailurePolicy


class Settings(BaseSettings):
    """All environment variables read by the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── App ───────────────────────────────────────────────────
    app_name: str = "docextract"
    debug: bool = False
    log_level: str = "INFO"

    # ── Extraction ────────────────────────────────────────────
    cleanup_failure_policy: CleanupFailurePolicy = CleanupFailurePolicy.WARN
    max_upload_mb: int = 25

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


# Singleton — import this wherever config is needed
settings = Settings()
