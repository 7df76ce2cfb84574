from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class PromptVariant:
    id: str
    name: str
    description: str
    prompt: str
    temperature: float
    max_tokens: int
    priority: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class AgentInfo:
    name: str
    description: str
    icon: str = ""
    color: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class FeatureEntry:
    agent_info: AgentInfo
    prompts: tuple[PromptVariant, ...]
    default_prompt: str
    factors: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class ScoringRule:
    criterion: str
    value: str
    id_fragment: str
    bonus: int


@dataclass(slots=True, frozen=True)
class ResolvedInvocation:
    prompt: str
    temperature: float
    max_tokens: int
    prompt_id: str


@dataclass(slots=True)
class AssistantResult:
    feature: str
    prompt_id: str
    text: str
    html: str
    title: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
