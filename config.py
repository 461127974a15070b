"""Configuration via pydantic-settings. Reads from .env or environment."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_PATH = "/api"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # ===== TUTORIAL API =====
    api_base_url: str = ""  # Full override, e.g. https://tutorials.example.com/api
    backend_url: str = "http://localhost:8080"  # Used with DEFAULT_API_PATH when no override
    request_timeout: Optional[float] = None  # Seconds; unset = wait for the backend

    # ===== SYSTEM =====
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8001
    load_on_startup: bool = True


def resolve_api_base_url(cfg: Settings) -> str:
    """Effective base URL for the tutorial collection."""
    if cfg.api_base_url:
        override = cfg.api_base_url
        return override[:-1] if override.endswith("/") else override
    return cfg.backend_url.rstrip("/") + DEFAULT_API_PATH


settings = Settings()
