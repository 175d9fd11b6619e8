"""
Runtime settings, read from ``OFFICE_TEMPLATER_*`` environment variables.

  OFFICE_TEMPLATER_LOG_LEVEL                  default INFO
  OFFICE_TEMPLATER_MAX_PASSES_PER_PARAGRAPH   default 10000
  OFFICE_TEMPLATER_LITERAL_TAGS               default false
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Attributes:
        log_level: Level for the CLI's log handler.
        max_passes_per_paragraph: Replacements allowed for one tag in one
            paragraph before the driver gives up. Only reached when a
            replacement value contains its own tag.
        literal_tags: Escape tags instead of treating them as regexes.
    """

    model_config = SettingsConfigDict(env_prefix="OFFICE_TEMPLATER_")

    log_level: str = "INFO"
    max_passes_per_paragraph: int = 10_000
    literal_tags: bool = False

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("max_passes_per_paragraph")
    @classmethod
    def _positive_passes(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_passes_per_paragraph must be >= 1")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
