# src/warehouse/core/config.py
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    # App
    app_name: str = "Warehouse Inventory Manager"
    app_version: str = "1.0.0"
    log_level: str = "WARNING"

    # Storage
    inventory_file: Path = Field(default=Path("Magazzino.json"))
    credentials_file: Path = Field(default=Path("Login.json"))
    json_indent: int = Field(default=4, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="WAREHOUSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
