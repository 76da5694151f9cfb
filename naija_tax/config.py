from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic import ConfigDict, field_validator

from naija_tax.tax.dispatch import TaxCategory, UnknownCategoryError, parse_category

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_optional(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


class Settings(BaseModel):
    default_category: TaxCategory = Field(
        default_factory=lambda: os.getenv("NAIJA_TAX_DEFAULT_CATEGORY", TaxCategory.EMPLOYEE.value)
    )
    log_level: str = Field(default_factory=lambda: os.getenv("NAIJA_TAX_LOG_LEVEL", "WARNING"))
    log_dir: str | None = Field(default_factory=lambda: _env_optional("NAIJA_TAX_LOG_DIR"))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("default_category", mode="before")
    @classmethod
    def _normalize_category(cls, value: TaxCategory | str) -> TaxCategory:
        try:
            return parse_category(value)
        except UnknownCategoryError as exc:
            raise ValueError(f"NAIJA_TAX_DEFAULT_CATEGORY: {exc.args[0]}") from exc

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        upper = (value or "WARNING").strip().upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"NAIJA_TAX_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {upper}")
        return upper

    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
