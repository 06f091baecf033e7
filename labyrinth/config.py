"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from labyrinth import __version__
from labyrinth.core.game import DIFFICULTY_SIZES

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        env_prefix="LABYRINTH_",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Labyrinth"
    app_version: str = __version__
    debug: bool = False

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Rate limiting
    rate_limit_requests: int = 120  # requests per minute for maze endpoints

    # Maze generation
    max_grid_size: int = 100  # largest rows/cols accepted from clients
    default_difficulty: str = "easy"

    @field_validator("default_difficulty")
    @classmethod
    def validate_default_difficulty(cls, v: str) -> str:
        """Only known difficulty tiers may be the default."""
        v = v.lower()
        if v not in DIFFICULTY_SIZES:
            raise ValueError(
                f"default_difficulty must be one of: {', '.join(DIFFICULTY_SIZES)}"
            )
        return v

    @field_validator("max_grid_size")
    @classmethod
    def validate_max_grid_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_grid_size must be at least 1")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
