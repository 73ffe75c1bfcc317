"""
Centralized configuration for the Campus Market backend.

All settings are loaded from environment variables with sensible defaults.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, field_validator
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
    app_name: str = "Campus Market"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Storage
    store_backend: Literal["memory", "file", "sqlite"] = "file"
    data_dir: Path = Path(".campus_market")
    sqlite_path: Optional[Path] = None  # defaults to <data_dir>/market.db

    # Accounts
    student_email_suffix: str = "@student.csulb.edu"
    min_password_length: int = Field(default=6, ge=1)
    credential_hasher: Literal["bcrypt", "sha256"] = "bcrypt"

    # Listings
    max_images: Optional[int] = Field(default=8, ge=1)
    default_auction_hours: int = Field(default=24, ge=1)
    max_auction_hours: int = Field(default=24 * 30, ge=1)
    max_amount: Decimal = Field(default=Decimal("1000000"), gt=0)
    bid_increment: Decimal = Field(default=Decimal("0"), ge=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def resolved_sqlite_path(self) -> Path:
        return self.sqlite_path or self.data_dir / "market.db"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
