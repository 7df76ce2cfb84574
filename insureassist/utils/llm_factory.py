from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

from ..config import Settings, load_settings
from ..gemini_client import GeminiClient


def load_project_env() -> None:
    root = Path(__file__).resolve().parents[2]
    load_dotenv(root / ".env", override=False)


def get_generation_client(settings: Settings | None = None) -> GeminiClient | None:
    """Return a Gemini client, or None when no API key is configured."""
    if settings is None:
        load_project_env()
        settings = load_settings()
    if not settings.has_api_key:
        return None
    return GeminiClient.from_settings(settings)
