from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .errors import UnknownFeatureError
from .prompts import PROMPT_LIBRARY
from .schemas import AgentInfo, FeatureEntry, PromptVariant

logger = logging.getLogger(__name__)

FEATURE_KEYS: tuple[str, ...] = (
    "fraud_detection",
    "claim_assistant",
    "product_recommendation",
    "clause_simplifier",
    "chat_support",
)


def _variant_from_dict(raw: Mapping[str, Any]) -> PromptVariant:
    return PromptVariant(
        id=str(raw["id"]),
        name=str(raw.get("name", raw["id"])),
        description=str(raw.get("description", "")),
        prompt=str(raw["prompt"]),
        temperature=float(raw["temperature"]),
        max_tokens=int(raw["max_tokens"]),
        priority=int(raw.get("priority", 0)),
    )


def _entry_from_dict(raw: Mapping[str, Any]) -> FeatureEntry:
    info = raw.get("agent_info", {})
    selection = raw.get("selection_criteria", {})
    return FeatureEntry(
        agent_info=AgentInfo(
            name=str(info.get("name", "")),
            description=str(info.get("description", "")),
            icon=str(info.get("icon", "")),
            color=str(info.get("color", "")),
        ),
        prompts=tuple(_variant_from_dict(item) for item in raw.get("prompts", [])),
        default_prompt=str(selection.get("default_prompt", "")),
        factors=tuple(selection.get("factors", [])),
    )


class PromptCatalog:
    """Read-only table of prompt variants per feature.

    Built once and handed to the selector, assistants and web app. Nothing
    mutates it after construction, so one instance can be shared by any
    number of concurrent requests.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, FeatureEntry]) -> None:
        self._entries: Mapping[str, FeatureEntry] = MappingProxyType(dict(entries))
        for problem in self.drift_report():
            logger.warning("Prompt catalog drift: %s", problem)

    @classmethod
    def from_library(cls, library: Mapping[str, Mapping[str, Any]]) -> PromptCatalog:
        return cls({key: _entry_from_dict(raw) for key, raw in library.items()})

    def feature_keys(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def get_entry(self, feature_key: str) -> FeatureEntry:
        entry = self._entries.get(feature_key)
        if entry is None:
            raise UnknownFeatureError(feature_key)
        return entry

    def get_agent_info(self, feature_key: str) -> AgentInfo:
        return self.get_entry(feature_key).agent_info

    def list_variants(self, feature_key: str) -> tuple[PromptVariant, ...]:
        entry = self._entries.get(feature_key)
        return entry.prompts if entry else ()

    def default_prompt_id(self, feature_key: str) -> str | None:
        entry = self._entries.get(feature_key)
        return entry.default_prompt if entry else None

    def drift_report(self) -> list[str]:
        problems: list[str] = []
        for key, entry in self._entries.items():
            ids = [variant.id for variant in entry.prompts]
            if not ids:
                problems.append(f"{key}: no prompt variants registered")
            elif entry.default_prompt not in ids:
                problems.append(
                    f"{key}: default prompt '{entry.default_prompt}' not among variants ({', '.join(ids)})"
                )
            if len(set(ids)) != len(ids):
                problems.append(f"{key}: duplicate prompt ids")
        return problems

    def __contains__(self, feature_key: object) -> bool:
        return feature_key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def load_default_catalog() -> PromptCatalog:
    return PromptCatalog.from_library(PROMPT_LIBRARY)
