from __future__ import annotations

import logging
from typing import Any

import pytest
import requests
from fastapi.testclient import TestClient

from insureassist.config import Settings
from insureassist.errors import GenerationError
from insureassist.gemini_client import GeminiClient
from insureassist.schemas import ResolvedInvocation
from insureassist.web_app import create_web_app


class _StubClient:
    def __init__(self) -> None:
        self.invocations: list[ResolvedInvocation] = []

    def generate(self, invocation: ResolvedInvocation, fallback: str = "") -> str:
        self.invocations.append(invocation)
        return "**Short answer:** yes."


class _FailingClient:
    def generate(self, invocation: ResolvedInvocation, fallback: str = "") -> str:
        raise GenerationError("Generation request failed (HTTP 403)", 403)


class _StubResponse:
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code

    def raise_for_status(self) -> None:
        raise requests.exceptions.HTTPError(f"{self.status_code} error", response=self)


class _StubSession:
    def __init__(self, response: _StubResponse) -> None:
        self.response = response

    def post(self, url: str, **kwargs: Any) -> _StubResponse:
        return self.response


def _settings(api_key: str | None = "test-key") -> Settings:
    return Settings(
        gemini_api_key=api_key,
        gemini_model="gemini-test",
        gemini_base_url="https://example.test/v1beta",
        gemini_timeout_seconds=None,
        log_level="INFO",
    )


def _client(stub: object | None = None, api_key: str | None = "test-key") -> TestClient:
    return TestClient(create_web_app(settings=_settings(api_key), client=stub))


def test_web_app_health_endpoint() -> None:
    response = _client(_StubClient()).get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_web_app_root_serves_html() -> None:
    response = _client(_StubClient()).get("/")
    assert response.status_code == 200
    assert "AI Insurance Assistant" in response.text


def test_agents_listing_and_detail() -> None:
    client = _client(_StubClient())
    listing = client.get("/api/agents")
    assert listing.status_code == 200
    payload = listing.json()
    assert payload["api_key_configured"] is True
    keys = [agent["feature"] for agent in payload["agents"]]
    assert "product_recommendation" in keys
    assert all("prompt" not in p for agent in payload["agents"] for p in agent["prompts"])

    detail = client.get("/api/agents/claim_assistant")
    assert detail.status_code == 200
    assert detail.json()["default_prompt"] == "claim_assistant_v1"

    assert client.get("/api/agents/unknown").status_code == 404


def test_project_info_endpoint() -> None:
    response = _client(_StubClient()).get("/api/project")
    assert response.status_code == 200
    assert "gemini-test" in response.json()["ai_model"]


def test_preview_returns_request_body_without_calling_api() -> None:
    stub = _StubClient()
    response = _client(stub).post(
        "/api/agents/product_recommendation/preview",
        json={
            "inputs": {"age": "34", "income": "80000", "family_size": "3", "coverageGoal": "family"},
            "criteria": {"coverage_complexity": "comprehensive"},
        },
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["prompt_id"] == "product_recommendation_v3"
    assert payload["request_body"]["generationConfig"]["topK"] == 40
    assert "Age: 34" in payload["request_body"]["contents"][0]["parts"][0]["text"]
    assert stub.invocations == []


def test_run_returns_html_and_prompt_id() -> None:
    stub = _StubClient()
    response = _client(stub).post(
        "/api/agents/chat_support/run",
        json={"inputs": {"user_question": "Does travel insurance cover lost luggage?"}},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["prompt_id"] == "chat_support_v1"
    assert '<strong class="font-semibold">Short answer:</strong>' in payload["html"]
    assert payload["title"] == "Support Response"
    assert "lost luggage" in stub.invocations[0].prompt


def test_run_without_api_key_returns_503() -> None:
    response = _client(None, api_key=None).post(
        "/api/agents/fraud_detection/run",
        json={"inputs": {"transaction_data": "claim data"}},
    )
    assert response.status_code == 503
    assert response.json()["detail"]["title"] == "API Key Missing"


def test_run_with_blank_input_returns_400() -> None:
    response = _client(_StubClient()).post(
        "/api/agents/clause_simplifier/run",
        json={"inputs": {"policy_text": "  "}},
    )
    assert response.status_code == 400
    assert response.json()["detail"]["fields"] == ["policy_text"]


def test_run_with_invalid_criteria_is_rejected() -> None:
    response = _client(_StubClient()).post(
        "/api/agents/fraud_detection/run",
        json={"inputs": {"transaction_data": "x"}, "criteria": {"complexity_level": "extreme"}},
    )
    assert response.status_code == 422


def test_transport_failure_returns_generic_502() -> None:
    response = _client(_FailingClient()).post(
        "/api/agents/claim_assistant/run",
        json={"inputs": {"rejection_reason": "Pre-existing condition not disclosed"}},
    )
    assert response.status_code == 502
    detail = response.json()["detail"]
    assert detail["title"] == "Request Failed"
    assert "403" not in detail["message"]


def test_generation_failure_is_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    session = _StubSession(_StubResponse(403))
    client = GeminiClient(api_key="test-key", session=session)
    app = create_web_app(settings=_settings(), client=client)
    with caplog.at_level(logging.ERROR, logger="insureassist"):
        response = TestClient(app).post(
            "/api/agents/claim_assistant/run",
            json={"inputs": {"rejection_reason": "Pre-existing condition not disclosed"}},
        )
    assert response.status_code == 502
    errors = [
        record
        for record in caplog.records
        if record.levelno >= logging.ERROR and record.name.startswith("insureassist")
    ]
    assert len(errors) == 1
    assert errors[0].name == "insureassist.gemini_client"


def test_error_details_have_a_message_the_page_can_show() -> None:
    client = _client(_StubClient())
    invalid = client.post(
        "/api/agents/fraud_detection/run",
        json={"inputs": {"transaction_data": "x"}, "criteria": {"complexity_level": "extreme"}},
    )
    assert isinstance(invalid.json()["detail"], list)
    blank = client.post("/api/agents/fraud_detection/run", json={"inputs": {"transaction_data": " "}})
    assert isinstance(blank.json()["detail"]["message"], str)
    unknown = client.post("/api/agents/nope/run", json={"inputs": {}})
    assert isinstance(unknown.json()["detail"], str)

    page = client.get("/").text
    assert 'typeof detail === "string"' in page
    assert 'typeof detail.message === "string"' in page
    assert "detail.message || detail ||" not in page
