"""
Centralized configuration for the Simply Happy server.

All settings are loaded from environment variables (or a local .env file)
with defaults suitable for local development.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Simply Happy"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "info"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False
    static_dir: str = "public"

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""
    supabase_db_url: str = ""  # Direct Postgres URL, only used by run_migrations.py

    # Sessions
    session_secret: str = ""
    session_cookie_name: str = "session"
    session_expires_in_days: int = 5
    recent_sign_in_seconds: int = 300
    cookie_secure: bool = False  # Enable behind HTTPS

    # CSRF
    csrf_cookie_name: str = "csrfToken"

    # Document store
    progress_table: str = "user_tips"
    tips_table: str = "tips"
    progress_max_retries: int = 5

    @property
    def session_expires_in_seconds(self) -> int:
        return self.session_expires_in_days * 24 * 60 * 60


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
