"""
Strategy classifier - ordered decision table.

Functional Core - pure, deterministic, total.

First matching rule wins. Later rules are still evaluated, but only to
explain why each other strategy was rejected. On overlap, table order is
the tie-break.
"""

from __future__ import annotations

from src.components.profile import (
    DataFreshness,
    InteractivityLevel,
    PageProfile,
    Privacy,
    SeoImportance,
)

from .models import DecisionRule, RenderStrategy, StrategyDecision

RULE_PRIVATE_OR_REALTIME = "private-or-realtime"
RULE_HEAVY_INTERACTIVE_LOW_SEO = "heavy-interactive-low-seo"
RULE_STATIC_DATA = "static-data"
RULE_PERIODIC_WHOLE_PAGE = "periodic-whole-page"
RULE_MIXED_PARTIAL = "mixed-partial"
RULE_INFRA_UNSUPPORTED_PARTIAL = "infra-unsupported-partial"


DECISION_TABLE: tuple[DecisionRule, ...] = (
    DecisionRule(
        rule_id=RULE_PRIVATE_OR_REALTIME,
        strategy=RenderStrategy.DYNAMIC,
        applies=lambda p: (
            p.privacy is Privacy.PRIVATE or p.data_freshness is DataFreshness.REAL_TIME
        ),
        rationale="Private or per-request volatile data cannot be precomputed",
        unmet_reason="data is public and not real-time",
    ),
    DecisionRule(
        rule_id=RULE_HEAVY_INTERACTIVE_LOW_SEO,
        strategy=RenderStrategy.CLIENT,
        applies=lambda p: (
            p.interactivity_level is InteractivityLevel.HEAVY
            and p.seo_importance is SeoImportance.LOW
        ),
        rationale="Client rendering is acceptable only when discoverability is unimportant",
        unmet_reason="requires heavy interactivity with low SEO importance",
    ),
    DecisionRule(
        rule_id=RULE_STATIC_DATA,
        strategy=RenderStrategy.STATIC,
        applies=lambda p: p.data_freshness is DataFreshness.STATIC,
        rationale="Fully precomputable, no per-request work",
        unmet_reason="data is not static",
    ),
    DecisionRule(
        rule_id=RULE_PERIODIC_WHOLE_PAGE,
        strategy=RenderStrategy.INCREMENTAL,
        applies=lambda p: (
            p.data_freshness in (DataFreshness.PERIODIC, DataFreshness.ON_EVENT)
            and p.interactivity_level is InteractivityLevel.NONE
        ),
        rationale="Whole-page cache with scheduled or triggered invalidation suffices",
        unmet_reason="requires periodic or event-driven data with no client interactivity",
    ),
    DecisionRule(
        rule_id=RULE_MIXED_PARTIAL,
        strategy=RenderStrategy.PARTIAL,
        applies=lambda p: p.infra.supports_incremental_shell,
        rationale="Static shell served immediately, dynamic segment resolved per request",
        unmet_reason="infrastructure does not support an incremental shell",
    ),
    DecisionRule(
        rule_id=RULE_INFRA_UNSUPPORTED_PARTIAL,
        strategy=RenderStrategy.DYNAMIC,
        applies=lambda p: True,
        rationale="Partial prerendering unavailable on this infrastructure; render per request",
        unmet_reason="",
    ),
)

RULES_BY_ID: dict[str, DecisionRule] = {rule.rule_id: rule for rule in DECISION_TABLE}


def _reject_reason(
    strategy: RenderStrategy,
    matched: list[DecisionRule],
    winner: DecisionRule,
    table: tuple[DecisionRule, ...],
) -> str:
    if any(rule.strategy is strategy for rule in matched):
        return f"preempted by {winner.rule_id}"
    winner_index = table.index(winner)
    for index, rule in enumerate(table):
        if rule.strategy is strategy:
            # Rules after the winner were never in contention
            if index > winner_index:
                return f"preempted by {winner.rule_id}"
            return rule.unmet_reason
    return "no rule selects this strategy"


def classify(
    profile: PageProfile,
    table: tuple[DecisionRule, ...] = DECISION_TABLE,
) -> StrategyDecision:
    """
    Select a rendering strategy for a profile.

    Args:
        profile: Normalized page profile.
        table: Ordered decision table; the last rule must always apply.

    Returns:
        StrategyDecision with the winning rule id and rejected alternatives.
    """
    matched = [rule for rule in table if rule.applies(profile)]
    winner = matched[0]

    rejected = tuple(
        (strategy, _reject_reason(strategy, matched, winner, table))
        for strategy in RenderStrategy
        if strategy is not winner.strategy
    )

    return StrategyDecision(
        strategy=winner.strategy,
        rationale=(winner.rule_id,),
        rejected_alternatives=rejected,
        interactivity_level=profile.interactivity_level,
    )


def explain(decision: StrategyDecision) -> list[str]:
    """Human-readable rationale lines for a decision."""
    lines = []
    for rule_id in decision.rationale:
        rule = RULES_BY_ID.get(rule_id)
        text = rule.rationale if rule else rule_id
        lines.append(f"{rule_id}: {text}")
    return lines
