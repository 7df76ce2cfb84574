from __future__ import annotations

from typing import Any

import pytest
import requests

from insureassist.config import Settings, load_settings
from insureassist.errors import ConfigurationError, GenerationError
from insureassist.gemini_client import GeminiClient, extract_text
from insureassist.schemas import ResolvedInvocation

INVOCATION = ResolvedInvocation(prompt="Explain deductibles", temperature=0.7, max_tokens=1000, prompt_id="chat_support_v1")


class _StubResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, bad_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._bad_json = bad_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error", response=self)

    def json(self) -> Any:
        if self._bad_json:
            raise ValueError("not json")
        return self._payload


class _StubSession:
    def __init__(self, response: _StubResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> _StubResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


def _ok(text: str) -> _StubResponse:
    return _StubResponse(payload={"candidates": [{"content": {"parts": [{"text": text}]}}]})


def test_generate_posts_request_body_and_returns_text() -> None:
    session = _StubSession(_ok("A deductible is..."))
    client = GeminiClient(api_key="secret", model="gemini-test", base_url="https://example.test/v1beta/", session=session)

    assert client.generate(INVOCATION) == "A deductible is..."
    call = session.calls[0]
    assert call["url"] == "https://example.test/v1beta/models/gemini-test:generateContent"
    assert call["headers"]["x-goog-api-key"] == "secret"
    assert call["json"]["contents"][0]["parts"][0]["text"] == "Explain deductibles"
    assert call["json"]["generationConfig"]["maxOutputTokens"] == 1000
    assert call["timeout"] is None


def test_http_error_raises_generation_error() -> None:
    session = _StubSession(_StubResponse(status_code=500))
    client = GeminiClient(api_key="secret", session=session)
    with pytest.raises(GenerationError) as excinfo:
        client.generate(INVOCATION)
    assert excinfo.value.status_code == 500


def test_network_error_raises_generation_error_without_leaking_key(caplog: pytest.LogCaptureFixture) -> None:
    session = _StubSession(error=requests.exceptions.ConnectionError("boom"))
    client = GeminiClient(api_key="secret-key", session=session)
    with pytest.raises(GenerationError):
        client.generate(INVOCATION)
    assert len(session.calls) == 1
    assert "secret-key" not in caplog.text


def test_malformed_success_body_uses_fallback() -> None:
    client = GeminiClient(api_key="secret", session=_StubSession(_StubResponse(payload={"candidates": []})))
    assert client.generate(INVOCATION, fallback="No analysis available") == "No analysis available"

    client = GeminiClient(api_key="secret", session=_StubSession(_StubResponse(bad_json=True)))
    assert client.generate(INVOCATION) == "No response available"


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {},
        {"candidates": [{}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
    ],
)
def test_extract_text_fallback(payload: Any) -> None:
    assert extract_text(payload, fallback="fallback") == "fallback"


def test_missing_api_key_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        GeminiClient(api_key="")


def test_from_settings_uses_configured_values() -> None:
    settings = Settings(
        gemini_api_key="k",
        gemini_model="gemini-x",
        gemini_base_url="https://example.test",
        gemini_timeout_seconds=12.5,
        log_level="INFO",
    )
    client = GeminiClient.from_settings(settings)
    assert client.endpoint == "https://example.test/models/gemini-x:generateContent"
    assert client.timeout == 12.5


def test_padded_api_key_is_sent_trimmed() -> None:
    settings = Settings(
        gemini_api_key="  abc123\n",
        gemini_model="gemini-x",
        gemini_base_url="https://example.test",
        gemini_timeout_seconds=None,
        log_level="INFO",
    )
    session = _StubSession(_ok("ok"))
    client = GeminiClient.from_settings(settings)
    client.session = session
    client.generate(INVOCATION)
    assert session.calls[0]["headers"]["x-goog-api-key"] == "abc123"


def test_blank_api_key_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        GeminiClient(api_key="   ")


def test_load_settings_trims_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", " abc123 \n")
    assert load_settings().gemini_api_key == "abc123"

    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    settings = load_settings()
    assert settings.gemini_api_key is None
    assert settings.has_api_key is False
