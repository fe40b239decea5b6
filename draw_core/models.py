# draw_core/models.py
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, field_validator

from .constants import (
    CATALOG_URL_TEMPLATE, CATALOG_VERSION, CATALOG_LOCALE, MAX_ROSTER, STORAGE_KEY,
)


class AppConfig(BaseModel):
    catalog_url: str = CATALOG_URL_TEMPLATE
    catalog_version: str = CATALOG_VERSION
    catalog_locale: str = CATALOG_LOCALE
    catalog_path: Optional[str] = None     # local champion.json instead of HTTP
    request_timeout: float = 10.0
    max_roster: int = MAX_ROSTER
    storage_path: str = ".data/roster.json"
    storage_key: str = STORAGE_KEY
    random_seed: Optional[int] = None      # None -> fresh entropy
    log_level: str = "INFO"

    @field_validator("max_roster")
    @classmethod
    def _positive_roster(cls, v):
        if not 1 <= v <= MAX_ROSTER:
            raise ValueError(f"max_roster must be between 1 and {MAX_ROSTER}")
        return v

    @field_validator("request_timeout")
    @classmethod
    def _positive_timeout(cls, v):
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v):
        v = str(v).upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log_level: {v}")
        return v


class ActionResult(BaseModel):
    ok: bool = True
    error: Optional[str] = None
