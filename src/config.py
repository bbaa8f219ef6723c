"""
Configuration settings for the formatting helpers.

Uses Pydantic Settings to load environment variables for the default URL
allow-list, logging, and formatting defaults. Helpers never read settings on
their own; only the default validator and the CLI do.
"""
from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.domain.models import DatePattern

DEFAULT_ALLOWED_DOMAINS = ["alidayu.com", "tmall.com", "taobao.com", "daily.tmall.net"]


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # URL validation
    allowed_domains: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_DOMAINS), alias="ALLOWED_DOMAINS"
    )
    strict_url_matching: bool = Field(False, alias="STRICT_URL_MATCHING")

    # Formatting defaults
    default_date_pattern: DatePattern = Field(DatePattern.DATETIME, alias="DEFAULT_DATE_PATTERN")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("allowed_domains", mode="before")
    @classmethod
    def _split_domains(cls, value: Any) -> Any:
        """Accept a JSON list or a comma-separated string from the environment."""
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.startswith("["):
                return json.loads(stripped)
            return [part.strip() for part in stripped.split(",") if part.strip()]
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_ALLOWED_DOMAINS", "Settings", "get_settings"]
