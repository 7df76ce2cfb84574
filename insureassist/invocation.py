from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .catalog import PromptCatalog
from .config import DEFAULT_GEMINI_MODEL
from .schemas import ResolvedInvocation
from .selector import select_variant

TOP_P = 0.8
TOP_K = 40

PROJECT_NAME = "InsureAssist"
PROJECT_VERSION = "2.0.0"


def substitute_variables(template: str, variables: Mapping[str, Any]) -> str:
    """Replace every ``{key}`` in ``template`` with ``variables[key]``.

    Keys missing from the template are ignored and placeholders without a
    matching key are left as they are.
    """
    prompt = template
    for key, value in variables.items():
        prompt = prompt.replace("{" + str(key) + "}", str(value))
    return prompt


def build_request_body(prompt: str, temperature: float, max_tokens: int) -> dict[str, Any]:
    return {
        "contents": [
            {
                "parts": [
                    {"text": prompt},
                ]
            }
        ],
        "generationConfig": {
            "temperature": temperature,
            "maxOutputTokens": max_tokens,
            "topP": TOP_P,
            "topK": TOP_K,
        },
    }


def request_body_for(invocation: ResolvedInvocation) -> dict[str, Any]:
    return build_request_body(invocation.prompt, invocation.temperature, invocation.max_tokens)


def resolve_invocation(
    catalog: PromptCatalog,
    feature_key: str,
    variables: Mapping[str, Any],
    criteria: Mapping[str, str] | None = None,
) -> ResolvedInvocation:
    variant = select_variant(catalog, feature_key, criteria)
    return ResolvedInvocation(
        prompt=substitute_variables(variant.prompt, variables),
        temperature=variant.temperature,
        max_tokens=variant.max_tokens,
        prompt_id=variant.id,
    )


def project_info(model: str = DEFAULT_GEMINI_MODEL) -> dict[str, str]:
    return {
        "name": PROJECT_NAME,
        "description": (
            "Multi-agent GenAI assistant for insurance fraud detection, claims assistance, "
            "product recommendations, policy clarification, and customer support"
        ),
        "version": PROJECT_VERSION,
        "ai_model": f"Google Gemini ({model})",
        "framework": "FastAPI + Python",
    }
