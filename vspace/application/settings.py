from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

# Application settings using pydantic-settings for structured configuration

class Settings(BaseSettings):
    # --- App ---
    app_name: str = "VSpace - vector space document search"
    app_env: str = "development"          # e.g., development / staging / production
    debug: bool = True
    # overrides the debug-derived level when set, e.g. "WARNING"
    log_level: Optional[str] = None

    # --- Server (same address the original binary listened on) ---
    host: str = "127.0.0.1"
    port: int = 9766

    # --- Index ---
    # None means no limit on ingested document length
    max_document_chars: Optional[int] = None

    # pydantic v2 / pydantic-settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",     # auto-load from your .env
        case_sensitive=False,  # .env keys can be upper/lower
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Cache settings so we don’t re-parse .env on every request."""
    return Settings()
