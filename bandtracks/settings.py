#!/usr/bin/env python
"""
Centralized configuration schema.

Merges defaults from config.Config with optional runtime overrides and
validates them before the application wires its services.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config import Config


class AppSettings(BaseModel):
    """Application-wide settings for the search proxy and favorites list."""

    model_config = ConfigDict(extra="ignore")

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=3001, ge=1, le=65535)
    debug: bool = False

    # Upstream catalog
    itunes_search_url: str = "https://itunes.apple.com/search"
    itunes_search_limit: int = 50
    itunes_timeout_seconds: float = Field(default=10.0, gt=0)

    # Search cache
    cache_ttl_seconds: int = Field(default=3600, gt=0)
    cache_maxsize: int = Field(default=1024, gt=0)

    @field_validator("itunes_search_limit", mode="before")
    @classmethod
    def _clamp_limit(cls, value: object) -> int:
        try:
            limit = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 50
        # iTunes rejects anything outside 1..200
        return max(1, min(limit, 200))

    @field_validator("itunes_search_url")
    @classmethod
    def _strip_url(cls, value: str) -> str:
        return value.strip()


def load_app_settings(overrides: Optional[Dict[str, Any]] = None) -> AppSettings:
    """Load settings merging config defaults with optional runtime overrides."""
    data: Dict[str, Any] = {
        "host": Config.HOST,
        "port": Config.PORT,
        "debug": Config.DEBUG,
        "itunes_search_url": Config.ITUNES_SEARCH_URL,
        "itunes_search_limit": Config.ITUNES_SEARCH_LIMIT,
        "itunes_timeout_seconds": Config.ITUNES_TIMEOUT_SECONDS,
        "cache_ttl_seconds": Config.SEARCH_CACHE_TTL_SECONDS,
        "cache_maxsize": Config.SEARCH_CACHE_MAXSIZE,
    }
    if overrides:
        data.update(overrides)
    return AppSettings.model_validate(data)


__all__ = [
    "AppSettings",
    "load_app_settings",
]
