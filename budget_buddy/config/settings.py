"""
Configuration Management for BudgetBuddy

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The core engine takes explicit arguments; only the Program and the
presenter read settings.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BudgetSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from BUDGET_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="BUDGET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Storage
    storage_backend: Literal["file", "memory"] = Field(
        default="file",
        description="Key-value medium holding the transaction blob"
    )
    storage_path: Path = Field(
        default=Path("budget_data.json"),
        description="Path of the JSON file used by the file backend"
    )
    storage_key: str = Field(
        default="transactions",
        min_length=1,
        description="Key under which the transaction list is stored"
    )

    # Decoding / recovery policy
    strict_type_decoding: bool = Field(
        default=False,
        description="Reject unknown transaction type strings instead of reading them as Income"
    )
    recover_corrupt_store: bool = Field(
        default=True,
        description="Start with an empty list when the stored blob is corrupt"
    )

    # Presentation
    currency_symbol: str = Field(
        default="€",
        max_length=5,
        description="Symbol prepended to formatted amounts"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Standard logging level name"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept standard level names."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.strip().upper()
        if level not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return level


@lru_cache()
def get_settings() -> BudgetSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return BudgetSettings()
