"""Load .env and settings.yaml, expose all configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

log = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _load_env() -> None:
    env_path = PROJECT_ROOT / ".env"
    load_dotenv(env_path)


def _load_yaml(settings_path: Path) -> dict:
    if settings_path.exists():
        try:
            with open(settings_path) as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError:
            log.warning("Failed to parse %s, using defaults", settings_path.name)
            return {}
    return {}


class Settings(BaseModel):
    mappings_api: str = "http://localhost:3000/api/mappings"

    @field_validator("mappings_api")
    @classmethod
    def strip_url(cls, v: str) -> str:
        return v.strip()

    # All durations in seconds.
    polling_interval: float = 5.0
    max_age: float = 60.0
    store_sweep_interval: float = 10.0
    request_timeout: float = 15.0
    log_level: str = "INFO"

    @field_validator("polling_interval", "max_age", "store_sweep_interval", "request_timeout")
    @classmethod
    def positive_duration(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("durations must be positive")
        return v


def load_settings(settings_path: Path | None = None) -> Settings:
    _load_env()
    raw = _load_yaml(settings_path or PROJECT_ROOT / "settings.yaml")
    url = os.getenv("MAPPINGS_API")
    if url:
        raw["mappings_api"] = url
    return Settings(**raw)
