"""
Lodestone - Application Settings

Loads configuration from LODESTONE_* environment variables (or a .env
file) using Pydantic Settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Generators
    seed: int | None = Field(default=None, ge=0, le=0xFFFFFFFF)
    quick_mode: bool = False

    # Bonus curve
    max_rand_depth: int = Field(default=128, ge=100)
    bonus_spread_divisor: int = Field(default=4, ge=1)

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "LODESTONE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
