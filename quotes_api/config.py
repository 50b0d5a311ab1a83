# quotes_api/config.py

from functools import lru_cache
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from the environment (and .env if present)."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    host: str = "0.0.0.0"
    port: int = 3000

    # Storage
    store_backend: Literal["json", "sql"] = "json"
    quotes_file: str = "data/quotes.json"
    database_url: str = "sqlite:///db.sqlite"  # file in project root

    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]
    static_dir: str = "public"


@lru_cache
def get_settings() -> Settings:
    return Settings()
