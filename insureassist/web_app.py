from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from .assistants import GenerationClient, InsuranceAssistant, build_assistants
from .catalog import PromptCatalog, load_default_catalog
from .config import Settings, load_settings
from .errors import (
    ConfigurationError,
    GenerationError,
    InputValidationError,
    NoPromptsAvailableError,
    UnknownFeatureError,
)
from .invocation import project_info, request_body_for
from .preflight import promote_warnings, run_preflight
from .utils.llm_factory import get_generation_client

logger = logging.getLogger(__name__)


class SelectionCriteriaIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    response_time_requirement: Literal["fast", "standard", "detailed"] | None = None
    complexity_level: Literal["simple", "moderate", "complex"] | None = None
    detail_requirement: Literal["basic", "comprehensive", "expert"] | None = None
    budget_constraints: Literal["low", "medium", "high"] | None = None
    coverage_complexity: Literal["basic", "standard", "comprehensive"] | None = None
    income_level: Literal["low", "medium", "high"] | None = None
    complexity_of_rejection: Literal["simple", "moderate", "complex"] | None = None
    legal_involvement: Literal["none", "basic", "extensive"] | None = None
    time_sensitivity: Literal["low", "medium", "high"] | None = None
    complexity_of_language: Literal["simple", "moderate", "complex"] | None = None
    legal_importance: Literal["low", "medium", "high"] | None = None
    time_urgency: Literal["low", "medium", "high"] | None = None
    question_complexity: Literal["simple", "moderate", "complex"] | None = None
    response_urgency: Literal["low", "medium", "high"] | None = None
    customer_expertise_level: Literal["beginner", "intermediate", "expert"] | None = None


class AssistRequestIn(BaseModel):
    inputs: dict[str, str] = Field(default_factory=dict)
    criteria: SelectionCriteriaIn | None = None

    def criteria_dict(self) -> dict[str, str]:
        if self.criteria is None:
            return {}
        return self.criteria.model_dump(exclude_none=True)


def _agent_snapshot(catalog: PromptCatalog, feature_key: str) -> dict[str, Any]:
    entry = catalog.get_entry(feature_key)
    return {
        "feature": feature_key,
        "agent_info": entry.agent_info.to_dict(),
        "default_prompt": entry.default_prompt,
        "factors": list(entry.factors),
        "prompts": [
            {
                "id": variant.id,
                "name": variant.name,
                "description": variant.description,
                "temperature": variant.temperature,
                "max_tokens": variant.max_tokens,
                "priority": variant.priority,
            }
            for variant in entry.prompts
        ],
    }


def _get_assistant(app: FastAPI, feature_key: str) -> InsuranceAssistant:
    assistants: dict[str, InsuranceAssistant] = app.state.assistants
    assistant = assistants.get(feature_key)
    if assistant is None:
        raise HTTPException(status_code=404, detail=f"unknown_feature: {feature_key}")
    return assistant


def create_web_app(
    settings: Settings | None = None,
    client: GenerationClient | None = None,
    catalog: PromptCatalog | None = None,
) -> FastAPI:
    project_root = Path(__file__).resolve().parents[1]
    if settings is None:
        load_dotenv(project_root / ".env", override=False)
        settings = load_settings()
    catalog = catalog or load_default_catalog()
    if client is None:
        client = get_generation_client(settings)
    if client is None:
        logger.warning("GEMINI_API_KEY is not set; assistants will refuse to run")

    app = FastAPI(title="InsureAssist Web Interface")
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.assistants = build_assistants(catalog, client)
    web_root = Path(__file__).resolve().parent / "web"

    @app.get("/")
    async def index() -> FileResponse:
        return FileResponse(web_root / "index.html")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/doctor")
    async def api_doctor(strict: bool = False) -> JSONResponse:
        report = run_preflight(project_root=project_root, catalog=catalog)
        if strict:
            promote_warnings(report)
        return JSONResponse(report)

    @app.get("/api/project")
    async def api_project() -> dict[str, str]:
        return project_info(model=settings.gemini_model)

    @app.get("/api/agents")
    async def api_agents() -> JSONResponse:
        return JSONResponse(
            {
                "api_key_configured": client is not None,
                "agents": [_agent_snapshot(catalog, key) for key in catalog.feature_keys()],
            }
        )

    @app.get("/api/agents/{feature_key}")
    async def api_agent(feature_key: str) -> JSONResponse:
        try:
            return JSONResponse(_agent_snapshot(catalog, feature_key))
        except UnknownFeatureError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

    @app.post("/api/agents/{feature_key}/preview")
    async def api_preview(feature_key: str, body: AssistRequestIn) -> JSONResponse:
        assistant = _get_assistant(app, feature_key)
        try:
            invocation = assistant.preview(body.inputs, body.criteria_dict())
        except InputValidationError as exc:
            raise HTTPException(status_code=400, detail={"message": str(exc), "fields": exc.fields}) from exc
        except NoPromptsAvailableError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return JSONResponse(
            {
                "feature": feature_key,
                "prompt_id": invocation.prompt_id,
                "prompt": invocation.prompt,
                "temperature": invocation.temperature,
                "max_tokens": invocation.max_tokens,
                "request_body": request_body_for(invocation),
            }
        )

    # Plain def: the outbound call blocks, so FastAPI runs it in its threadpool.
    @app.post("/api/agents/{feature_key}/run")
    def api_run(feature_key: str, body: AssistRequestIn) -> JSONResponse:
        assistant = _get_assistant(app, feature_key)
        try:
            result = assistant.run(body.inputs, body.criteria_dict())
        except ConfigurationError as exc:
            raise HTTPException(
                status_code=503,
                detail={"title": "API Key Missing", "message": str(exc)},
            ) from exc
        except InputValidationError as exc:
            raise HTTPException(
                status_code=400,
                detail={"title": "Missing Input", "message": str(exc), "fields": exc.fields},
            ) from exc
        except NoPromptsAvailableError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except GenerationError as exc:
            raise HTTPException(
                status_code=502,
                detail={
                    "title": "Request Failed",
                    "message": "Failed to generate a response. Please check your API key and try again.",
                },
            ) from exc
        return JSONResponse(result.to_dict())

    return app
