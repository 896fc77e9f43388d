"""
Strategy component unit tests.

Tests for each decision rule, rule ordering and rejected alternatives.
"""

from __future__ import annotations

import pytest

from src.components.profile import (
    DataFreshness,
    InfraProfile,
    InteractivityLevel,
    PageProfile,
    Privacy,
    Runtime,
    SeoImportance,
)
from src.components.strategy import (
    DECISION_TABLE,
    RULE_HEAVY_INTERACTIVE_LOW_SEO,
    RULE_INFRA_UNSUPPORTED_PARTIAL,
    RULE_MIXED_PARTIAL,
    RULE_PERIODIC_WHOLE_PAGE,
    RULE_PRIVATE_OR_REALTIME,
    RULE_STATIC_DATA,
    ClassifyInput,
    RenderStrategy,
    classify,
    explain,
    run,
)


def make_profile(
    freshness: DataFreshness = DataFreshness.PERIODIC,
    privacy: Privacy = Privacy.PUBLIC,
    seo: SeoImportance = SeoImportance.HIGH,
    interactivity: InteractivityLevel = InteractivityLevel.NONE,
    shell: bool = True,
) -> PageProfile:
    return PageProfile(
        data_freshness=freshness,
        privacy=privacy,
        seo_importance=seo,
        interactivity_level=interactivity,
        infra=InfraProfile(runtime=Runtime.NODE, supports_incremental_shell=shell),
    )


# --- Rule Tests ---


class TestDecisionRules:
    """One test per rule in the decision table."""

    def test_private_is_dynamic(self) -> None:
        decision = classify(make_profile(privacy=Privacy.PRIVATE))
        assert decision.strategy is RenderStrategy.DYNAMIC
        assert decision.rationale == (RULE_PRIVATE_OR_REALTIME,)

    def test_realtime_is_dynamic(self) -> None:
        decision = classify(make_profile(freshness=DataFreshness.REAL_TIME))
        assert decision.strategy is RenderStrategy.DYNAMIC
        assert decision.rationale == (RULE_PRIVATE_OR_REALTIME,)

    def test_heavy_interactive_low_seo_is_client(self) -> None:
        decision = classify(
            make_profile(interactivity=InteractivityLevel.HEAVY, seo=SeoImportance.LOW)
        )
        assert decision.strategy is RenderStrategy.CLIENT
        assert decision.rationale == (RULE_HEAVY_INTERACTIVE_LOW_SEO,)

    def test_heavy_interactive_high_seo_not_client(self) -> None:
        decision = classify(
            make_profile(interactivity=InteractivityLevel.HEAVY, seo=SeoImportance.HIGH)
        )
        assert decision.strategy is RenderStrategy.PARTIAL

    def test_static_data_is_static(self) -> None:
        decision = classify(make_profile(freshness=DataFreshness.STATIC))
        assert decision.strategy is RenderStrategy.STATIC
        assert decision.rationale == (RULE_STATIC_DATA,)

    @pytest.mark.parametrize("freshness", [DataFreshness.PERIODIC, DataFreshness.ON_EVENT])
    def test_periodic_without_interactivity_is_incremental(
        self, freshness: DataFreshness
    ) -> None:
        decision = classify(make_profile(freshness=freshness))
        assert decision.strategy is RenderStrategy.INCREMENTAL
        assert decision.rationale == (RULE_PERIODIC_WHOLE_PAGE,)

    def test_mixed_with_shell_support_is_partial(self) -> None:
        decision = classify(
            make_profile(freshness=DataFreshness.ON_EVENT, interactivity=InteractivityLevel.PARTIAL)
        )
        assert decision.strategy is RenderStrategy.PARTIAL
        assert decision.rationale == (RULE_MIXED_PARTIAL,)

    def test_mixed_without_shell_support_falls_back_to_dynamic(self) -> None:
        decision = classify(make_profile(interactivity=InteractivityLevel.PARTIAL, shell=False))
        assert decision.strategy is RenderStrategy.DYNAMIC
        assert decision.rationale == (RULE_INFRA_UNSUPPORTED_PARTIAL,)
        assert decision.rejected_reason(RenderStrategy.PARTIAL) == (
            "infrastructure does not support an incremental shell"
        )


# --- Ordering Tests ---


class TestRuleOrdering:
    """Earlier rules always win on overlap."""

    def test_private_beats_heavy_low_seo(self) -> None:
        decision = classify(
            make_profile(
                privacy=Privacy.PRIVATE,
                interactivity=InteractivityLevel.HEAVY,
                seo=SeoImportance.LOW,
            )
        )
        assert decision.strategy is RenderStrategy.DYNAMIC
        assert decision.rejected_reason(RenderStrategy.CLIENT) == (
            f"preempted by {RULE_PRIVATE_OR_REALTIME}"
        )

    def test_client_beats_static(self) -> None:
        decision = classify(
            make_profile(
                freshness=DataFreshness.STATIC,
                interactivity=InteractivityLevel.HEAVY,
                seo=SeoImportance.LOW,
            )
        )
        assert decision.strategy is RenderStrategy.CLIENT
        assert decision.rejected_reason(RenderStrategy.STATIC) == (
            f"preempted by {RULE_HEAVY_INTERACTIVE_LOW_SEO}"
        )

    def test_static_beats_partial(self) -> None:
        decision = classify(
            make_profile(freshness=DataFreshness.STATIC, interactivity=InteractivityLevel.PARTIAL)
        )
        assert decision.strategy is RenderStrategy.STATIC
        assert decision.rejected_reason(RenderStrategy.PARTIAL) == (
            f"preempted by {RULE_STATIC_DATA}"
        )

    def test_table_order(self) -> None:
        assert [rule.rule_id for rule in DECISION_TABLE] == [
            RULE_PRIVATE_OR_REALTIME,
            RULE_HEAVY_INTERACTIVE_LOW_SEO,
            RULE_STATIC_DATA,
            RULE_PERIODIC_WHOLE_PAGE,
            RULE_MIXED_PARTIAL,
            RULE_INFRA_UNSUPPORTED_PARTIAL,
        ]

    def test_custom_table_order_is_tie_break(self) -> None:
        # Swapping the first two rules changes the outcome for an overlapping profile
        swapped = (DECISION_TABLE[1], DECISION_TABLE[0], *DECISION_TABLE[2:])
        profile = make_profile(
            privacy=Privacy.PRIVATE,
            interactivity=InteractivityLevel.HEAVY,
            seo=SeoImportance.LOW,
        )
        assert classify(profile, swapped).strategy is RenderStrategy.CLIENT


# --- Explainability Tests ---


class TestRejectedAlternatives:
    """Every non-chosen strategy carries a reason."""

    def test_one_entry_per_other_strategy(self) -> None:
        decision = classify(make_profile(freshness=DataFreshness.STATIC))
        rejected = [strategy for strategy, _ in decision.rejected_alternatives]

        assert RenderStrategy.STATIC not in rejected
        assert set(rejected) == set(RenderStrategy) - {RenderStrategy.STATIC}
        assert all(reason for _, reason in decision.rejected_alternatives)

    def test_unmet_reason_for_non_matching_rule(self) -> None:
        decision = classify(make_profile(freshness=DataFreshness.STATIC))
        assert decision.rejected_reason(RenderStrategy.CLIENT) == (
            "requires heavy interactivity with low SEO importance"
        )

    def test_later_rules_are_preempted_by_winner(self) -> None:
        decision = classify(make_profile(freshness=DataFreshness.STATIC, shell=False))
        assert decision.strategy is RenderStrategy.STATIC
        assert decision.rejected_reason(RenderStrategy.PARTIAL) == (
            f"preempted by {RULE_STATIC_DATA}"
        )
        assert decision.rejected_reason(RenderStrategy.INCREMENTAL) == (
            f"preempted by {RULE_STATIC_DATA}"
        )

    def test_chosen_strategy_has_no_rejection(self) -> None:
        decision = classify(make_profile())
        assert decision.rejected_reason(decision.strategy) is None

    def test_explain_lines(self) -> None:
        decision = classify(make_profile(privacy=Privacy.PRIVATE))
        lines = explain(decision)
        assert len(lines) == 1
        assert lines[0].startswith(f"{RULE_PRIVATE_OR_REALTIME}: ")

    def test_to_dict(self) -> None:
        data = classify(make_profile(freshness=DataFreshness.STATIC)).to_dict()
        assert data["strategy"] == "static"
        assert data["rationale"] == [RULE_STATIC_DATA]
        assert "static" not in data["rejectedAlternatives"]
        assert set(data["rejectedAlternatives"]) == {"incremental", "partial", "dynamic", "client"}


# --- Component Entry Point Tests ---


class TestRun:
    def test_run_returns_decision_and_explanation(self) -> None:
        result = run(ClassifyInput(profile=make_profile()))
        assert result.decision.strategy is RenderStrategy.INCREMENTAL
        assert result.explanation == explain(result.decision)

    def test_decision_carries_interactivity(self) -> None:
        result = run(ClassifyInput(profile=make_profile(interactivity=InteractivityLevel.HEAVY)))
        assert result.decision.interactivity_level is InteractivityLevel.HEAVY
