from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Classical Cipher Workbench"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Input limits
    max_text_length: int = 10_000

    # Playground defaults
    playground_source: str = "THE QUICK BROWN FOX jumps 123"
    playground_caesar_shift: int = 3
    playground_vigenere_key: str = "KEY"
    playground_xor_key: str = "secret"
    playground_scytale_rows: int = 4

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
