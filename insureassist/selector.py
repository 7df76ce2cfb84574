from __future__ import annotations

from collections.abc import Mapping

from .catalog import PromptCatalog
from .errors import NoPromptsAvailableError
from .schemas import PromptVariant, ScoringRule

PRIORITY_WEIGHT = 10


def _rules(criterion: str, bonus: int, *value_to_fragment: tuple[str, str]) -> tuple[ScoringRule, ...]:
    return tuple(ScoringRule(criterion, value, fragment, bonus) for value, fragment in value_to_fragment)


# Each rule adds `bonus` when criteria[criterion] == value and the variant id
# contains id_fragment. Features missing from this table score by priority only.
SCORING_RULES: dict[str, tuple[ScoringRule, ...]] = {
    "fraud_detection": (
        *_rules("response_time_requirement", 20, ("fast", "v2"), ("detailed", "v3"), ("standard", "v1")),
        *_rules("complexity_level", 15, ("simple", "v2"), ("complex", "v3"), ("moderate", "v1")),
    ),
    "claim_assistant": (
        *_rules("complexity_of_rejection", 20, ("simple", "v2"), ("complex", "v3"), ("moderate", "v1")),
        *_rules("legal_involvement", 15, ("extensive", "v3"), ("none", "v2"), ("basic", "v1")),
    ),
    "product_recommendation": (
        *_rules("budget_constraints", 20, ("low", "v2"), ("high", "v3"), ("medium", "v1")),
        *_rules("coverage_complexity", 15, ("basic", "v2"), ("comprehensive", "v3"), ("standard", "v1")),
    ),
    "clause_simplifier": (
        *_rules("complexity_of_language", 20, ("simple", "v2"), ("complex", "v3"), ("moderate", "v1")),
        *_rules("legal_importance", 15, ("high", "v3"), ("low", "v2"), ("medium", "v1")),
    ),
}


def score_variant(
    feature_key: str,
    variant: PromptVariant,
    criteria: Mapping[str, str],
) -> int:
    rules = SCORING_RULES.get(feature_key)
    if rules is None:
        return variant.priority

    score = variant.priority * PRIORITY_WEIGHT
    for rule in rules:
        if criteria.get(rule.criterion) == rule.value and rule.id_fragment in variant.id:
            score += rule.bonus
    return score


def select_variant(
    catalog: PromptCatalog,
    feature_key: str,
    criteria: Mapping[str, str] | None = None,
) -> PromptVariant:
    variants = catalog.list_variants(feature_key)
    if not variants:
        raise NoPromptsAvailableError(feature_key)

    if not criteria:
        default_id = catalog.default_prompt_id(feature_key)
        for variant in variants:
            if variant.id == default_id:
                return variant
        return variants[0]

    # max() keeps the first of equally scored variants.
    return max(variants, key=lambda variant: score_variant(feature_key, variant, criteria))
