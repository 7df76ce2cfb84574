from __future__ import annotations

import logging
from typing import Any

import requests

from .config import DEFAULT_GEMINI_BASE_URL, DEFAULT_GEMINI_MODEL, Settings
from .errors import ConfigurationError, GenerationError
from .invocation import request_body_for
from .schemas import ResolvedInvocation

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_TEXT = "No response available"


def extract_text(payload: Any, fallback: str = DEFAULT_FALLBACK_TEXT) -> str:
    """Return ``candidates[0].content.parts[0].text`` or ``fallback``."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return fallback
    if not isinstance(text, str) or not text:
        return fallback
    return text


class GeminiClient:
    """One-shot POST to the Gemini ``generateContent`` endpoint.

    No retries and no timeout unless one is configured. Failures are logged
    and raised as ``GenerationError``.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_MODEL,
        base_url: str = DEFAULT_GEMINI_BASE_URL,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        api_key = (api_key or "").strip()
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY is not configured")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> GeminiClient:
        return cls(
            api_key=settings.gemini_api_key or "",
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.gemini_timeout_seconds,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(
        self,
        invocation: ResolvedInvocation,
        fallback: str = DEFAULT_FALLBACK_TEXT,
    ) -> str:
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }
        logger.info(
            "Calling %s with prompt %s (temperature=%s, max_tokens=%s)",
            self.model,
            invocation.prompt_id,
            invocation.temperature,
            invocation.max_tokens,
        )
        try:
            response = self.session.post(
                self.endpoint,
                headers=headers,
                json=request_body_for(invocation),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            status_code = getattr(exc.response, "status_code", None)
            logger.error("Gemini request for %s failed with HTTP %s", invocation.prompt_id, status_code)
            raise GenerationError(f"Generation request failed (HTTP {status_code})", status_code) from exc
        except requests.exceptions.RequestException as exc:
            logger.error("Gemini request for %s failed: %s", invocation.prompt_id, exc.__class__.__name__)
            raise GenerationError("Generation request failed") from exc

        try:
            payload = response.json()
        except ValueError:
            logger.warning("Gemini returned a non-JSON body for %s", invocation.prompt_id)
            return fallback
        return extract_text(payload, fallback=fallback)
