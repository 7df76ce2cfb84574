from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from .catalog import PromptCatalog
from .errors import ConfigurationError, InputValidationError
from .formatting import format_markdown
from .invocation import resolve_invocation
from .schemas import AssistantResult, ResolvedInvocation

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Please set GEMINI_API_KEY in your .env file."


class GenerationClient(Protocol):
    def generate(self, invocation: ResolvedInvocation, fallback: str = ...) -> str: ...


class InsuranceAssistant:
    """Shared flow for every feature: check config, validate, resolve, call, render."""

    feature_key: str = ""
    input_fields: dict[str, str] = {}
    fallback_text: str = "No response available"
    result_title: str = "Response"
    success_message: str = "Response generated."
    missing_input_message: str = "Please fill in: {fields}"

    def __init__(self, catalog: PromptCatalog, client: GenerationClient | None) -> None:
        self.catalog = catalog
        self.client = client

    def variables(self, inputs: Mapping[str, Any]) -> dict[str, str]:
        return {name: str(inputs.get(name, "")).strip() for name in self.input_fields}

    def validate(self, inputs: Mapping[str, Any]) -> dict[str, str]:
        values = self.variables(inputs)
        missing = [name for name, value in values.items() if not value]
        if missing:
            labels = ", ".join(self.input_fields[name] for name in missing)
            raise InputValidationError(self.missing_input_message.format(fields=labels), missing)
        return values

    def preview(
        self,
        inputs: Mapping[str, Any],
        criteria: Mapping[str, str] | None = None,
    ) -> ResolvedInvocation:
        return resolve_invocation(self.catalog, self.feature_key, self.validate(inputs), criteria)

    def run(
        self,
        inputs: Mapping[str, Any],
        criteria: Mapping[str, str] | None = None,
    ) -> AssistantResult:
        if self.client is None:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        invocation = self.preview(inputs, criteria)
        text = self.client.generate(invocation, fallback=self.fallback_text)
        logger.info("%s answered with prompt %s", self.feature_key, invocation.prompt_id)
        return AssistantResult(
            feature=self.feature_key,
            prompt_id=invocation.prompt_id,
            text=text,
            html=format_markdown(text),
            title=self.result_title,
            message=f"{self.success_message} Prompt used: {invocation.prompt_id}",
        )


class FraudDetectionAssistant(InsuranceAssistant):
    feature_key = "fraud_detection"
    input_fields = {"transaction_data": "Transaction/Claim Details"}
    fallback_text = "No analysis available"
    result_title = "Fraud Analysis Results"
    success_message = "Fraud detection analysis has been generated."
    missing_input_message = "Please enter transaction or claim details to analyze."


class ClaimAssistant(InsuranceAssistant):
    feature_key = "claim_assistant"
    input_fields = {"rejection_reason": "Rejection Reason"}
    fallback_text = "No assistance available"
    result_title = "Claim Assistance & Appeal Draft"
    success_message = "Claim help and appeal draft have been created."
    missing_input_message = "Please enter the claim rejection reason or letter."


class ProductRecommendationAssistant(InsuranceAssistant):
    feature_key = "product_recommendation"
    input_fields = {
        "age": "age",
        "income": "income",
        "family_size": "family size",
        "coverageGoal": "coverage goal",
    }
    fallback_text = "No recommendations available"
    result_title = "Personalized Recommendations"
    success_message = "Personalized insurance recommendations are ready."


class ClauseSimplifierAssistant(InsuranceAssistant):
    feature_key = "clause_simplifier"
    input_fields = {"policy_text": "Policy Text"}
    fallback_text = "No simplification available"
    result_title = "Simplified Explanation"
    success_message = "Policy clauses have been simplified into plain English."
    missing_input_message = "Please paste the policy clauses you want simplified."


class ChatSupportAssistant(InsuranceAssistant):
    feature_key = "chat_support"
    input_fields = {"user_question": "Your Question"}
    fallback_text = "No response available"
    result_title = "Support Response"
    success_message = "Support response generated."
    missing_input_message = "Please enter your insurance-related question."


ASSISTANT_CLASSES: tuple[type[InsuranceAssistant], ...] = (
    FraudDetectionAssistant,
    ClaimAssistant,
    ProductRecommendationAssistant,
    ClauseSimplifierAssistant,
    ChatSupportAssistant,
)


def build_assistants(
    catalog: PromptCatalog,
    client: GenerationClient | None,
) -> dict[str, InsuranceAssistant]:
    return {cls.feature_key: cls(catalog=catalog, client=client) for cls in ASSISTANT_CLASSES}
