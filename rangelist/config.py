"""Environment-based configuration using pydantic-settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration loaded from ``RANGELIST_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="RANGELIST_")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    output_format: Literal["table", "json"] = "table"
    verify_integrity: bool = False
    show_steps: bool = False
