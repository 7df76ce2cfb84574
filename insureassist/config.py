from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash-latest"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


def _env_float(name: str) -> float | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        return None


@dataclass(slots=True)
class Settings:
    gemini_api_key: str | None
    gemini_model: str
    gemini_base_url: str
    gemini_timeout_seconds: float | None

    log_level: str

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key and self.gemini_api_key.strip())


def _env_secret(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    return value.strip() or None


def load_settings() -> Settings:
    return Settings(
        gemini_api_key=_env_secret("GEMINI_API_KEY"),
        gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        gemini_base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL).rstrip("/"),
        gemini_timeout_seconds=_env_float("GEMINI_TIMEOUT_SECONDS"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
