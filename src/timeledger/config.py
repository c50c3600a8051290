"""Ledger tool settings read from the environment."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for the CLI: ledger location and log verbosity."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ledger_path: Optional[Path] = Field(None, alias="TIMELEDGER_LEDGER")
    log_level: str = Field("INFO", alias="TIMELEDGER_LOG_LEVEL")


_CACHED: Optional[Settings] = None


def get_settings() -> Settings:
    """Load settings on first use and reuse them afterwards."""

    global _CACHED
    if _CACHED is None:
        _CACHED = Settings()
    return _CACHED


__all__ = ["Settings", "get_settings"]
