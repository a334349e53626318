from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taxcalc import __version__

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ENV_BOOL_TRUE


def _env_raw(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


class Settings(BaseModel):
    default_province: str = Field(default_factory=lambda: os.getenv("TAXCALC_DEFAULT_PROVINCE", "ON"))
    default_tax_year: int | None = Field(default_factory=lambda: _env_raw("TAXCALC_TAX_YEAR"))
    periods_per_year: int = Field(default_factory=lambda: _env_raw("TAXCALC_PERIODS_PER_YEAR") or 12)
    log_level: str = Field(default_factory=lambda: os.getenv("TAXCALC_LOG_LEVEL", "INFO"))
    log_to_file: bool = Field(default_factory=lambda: _env_bool("TAXCALC_LOG_TO_FILE", False))
    log_dir: str = Field(default_factory=lambda: os.getenv("TAXCALC_LOG_DIR", "logs"))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", __version__))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))

    # env values arrive through default_factory and must still be validated
    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("default_province", mode="before")
    @classmethod
    def _normalize_province(cls, value: str) -> str:
        normalized = (value or "ON").strip().upper()
        if len(normalized) != 2 or not normalized.isalpha():
            raise ValueError(f"TAXCALC_DEFAULT_PROVINCE must be a two-letter code, got {value!r}")
        return normalized

    @field_validator("default_tax_year")
    @classmethod
    def _zero_year_is_unset(cls, value: int | None) -> int | None:
        return value or None

    @field_validator("periods_per_year")
    @classmethod
    def _validate_periods(cls, value: int) -> int:
        if value < 1:
            raise ValueError("TAXCALC_PERIODS_PER_YEAR must be at least 1")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        upper = (value or "INFO").strip().upper()
        if upper not in LOG_LEVELS:
            raise ValueError(f"TAXCALC_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {upper}")
        return upper

    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
