"""
Regression tests for the advisor's cross-component invariants.

Every valid profile combination is enumerated, so the decision table is
checked exhaustively rather than by example.
"""

import itertools

import pytest

from src.components.caching import CacheMode, CachingHints, InvalidHintError, synthesize
from src.components.profile import (
    ConflictingConstraintError,
    DataFreshness,
    InfraProfile,
    InteractivityLevel,
    PageProfile,
    Privacy,
    Runtime,
    SeoImportance,
    normalize,
)
from src.components.report import recommend
from src.components.strategy import RenderStrategy, StrategyDecision, classify
from src.components.validator import DeclaredConfig, Severity, validate


def all_profiles() -> list[PageProfile]:
    profiles = []
    for freshness, privacy, seo, interactivity, runtime, shell in itertools.product(
        DataFreshness,
        Privacy,
        SeoImportance,
        InteractivityLevel,
        Runtime,
        (True, False),
    ):
        if privacy is Privacy.PRIVATE and freshness is DataFreshness.STATIC:
            continue
        profiles.append(
            PageProfile(
                data_freshness=freshness,
                privacy=privacy,
                seo_importance=seo,
                interactivity_level=interactivity,
                infra=InfraProfile(runtime=runtime, supports_incremental_shell=shell),
            )
        )
    return profiles


PROFILES = all_profiles()


# --- Classification ---


@pytest.mark.parametrize("profile", PROFILES)
def test_classification_is_total_and_explained(profile: PageProfile) -> None:
    decision = classify(profile)

    assert decision.strategy in RenderStrategy
    assert decision.rationale
    rejected = {strategy for strategy, _ in decision.rejected_alternatives}
    assert rejected == set(RenderStrategy) - {decision.strategy}
    assert all(reason for _, reason in decision.rejected_alternatives)


@pytest.mark.parametrize("profile", PROFILES)
def test_classification_is_deterministic(profile: PageProfile) -> None:
    assert classify(profile) == classify(profile)


@pytest.mark.parametrize("profile", [p for p in PROFILES if p.privacy is Privacy.PRIVATE])
def test_private_data_always_dynamic(profile: PageProfile) -> None:
    assert classify(profile).strategy is RenderStrategy.DYNAMIC


@pytest.mark.parametrize(
    "profile",
    [p for p in PROFILES if p.data_freshness is DataFreshness.REAL_TIME],
)
def test_realtime_data_always_dynamic(profile: PageProfile) -> None:
    assert classify(profile).strategy is RenderStrategy.DYNAMIC


@pytest.mark.parametrize(
    "profile",
    [
        p
        for p in PROFILES
        if p.privacy is Privacy.PUBLIC
        and p.data_freshness is DataFreshness.STATIC
        and not (
            p.interactivity_level is InteractivityLevel.HEAVY
            and p.seo_importance is SeoImportance.LOW
        )
    ],
)
def test_public_static_data_is_static(profile: PageProfile) -> None:
    assert classify(profile).strategy is RenderStrategy.STATIC


@pytest.mark.parametrize(
    "profile",
    [p for p in PROFILES if not p.infra.supports_incremental_shell],
)
def test_partial_requires_shell_support(profile: PageProfile) -> None:
    assert classify(profile).strategy is not RenderStrategy.PARTIAL


# --- Normalization ---


@pytest.mark.parametrize("profile", PROFILES)
def test_normalize_is_idempotent(profile: PageProfile) -> None:
    again = normalize(profile.to_dict())

    assert again.data_freshness is profile.data_freshness
    assert again.privacy is profile.privacy
    assert again.seo_importance is profile.seo_importance
    assert again.interactivity_level is profile.interactivity_level
    assert again.infra == profile.infra
    assert again.defaults_applied == ()


def test_private_static_rejected() -> None:
    with pytest.raises(ConflictingConstraintError):
        normalize({"data_freshness": "static", "privacy": "private"})


# --- Caching ---


@pytest.mark.parametrize("strategy", [RenderStrategy.DYNAMIC, RenderStrategy.CLIENT])
def test_uncached_strategies_never_plan(strategy: RenderStrategy) -> None:
    plan = synthesize(
        StrategyDecision(strategy=strategy, rationale=("test",)),
        CachingHints(interval_seconds=60, tags=("a",), regenerate_on_demand=True),
    )
    assert plan.mode is CacheMode.NONE
    assert plan.interval_seconds is None
    assert plan.tags == ()


def test_zero_interval_rejected() -> None:
    with pytest.raises(InvalidHintError):
        synthesize(
            StrategyDecision(strategy=RenderStrategy.INCREMENTAL, rationale=("test",)),
            CachingHints(interval_seconds=0),
        )


@pytest.mark.parametrize(
    "hints",
    [
        CachingHints(interval_seconds=30),
        CachingHints(tags=("posts",)),
        CachingHints(interval_seconds=30, tags=("posts",), regenerate_on_demand=True),
    ],
)
@pytest.mark.parametrize("strategy", list(RenderStrategy))
def test_plan_shape(strategy: RenderStrategy, hints: CachingHints) -> None:
    try:
        plan = synthesize(StrategyDecision(strategy=strategy, rationale=("test",)), hints)
    except InvalidHintError:
        return

    if plan.mode is CacheMode.TIME_BASED:
        assert plan.interval_seconds and plan.interval_seconds > 0
    else:
        assert plan.interval_seconds is None
    if plan.mode in (CacheMode.TAG_BASED, CacheMode.ON_DEMAND):
        assert plan.tags
    if plan.mode in (CacheMode.NONE, CacheMode.TIME_BASED):
        assert plan.tags == ()


# --- Validation ---


@pytest.mark.parametrize("strategy", list(RenderStrategy))
def test_secret_leak_always_reported(strategy: RenderStrategy) -> None:
    findings = validate(
        StrategyDecision(strategy=strategy, rationale=("test",)),
        DeclaredConfig(client_props_contain_secrets=True),
    )
    r5 = [f for f in findings if f.rule_id == "R5"]
    assert len(r5) == 1
    assert r5[0].severity is Severity.ERROR


@pytest.mark.parametrize("strategy", list(RenderStrategy))
def test_findings_sorted_errors_first(strategy: RenderStrategy) -> None:
    findings = validate(
        StrategyDecision(strategy=strategy, rationale=("test",)),
        DeclaredConfig(
            client_boundary_scope=frozenset({"A", "B", "C"}),
            explicit_cache_directives=(("f", False),),
            client_props_contain_secrets=True,
        ),
    )
    severities = [f.severity for f in findings]
    assert severities == sorted(severities, key=lambda s: s is Severity.WARNING)


# --- End-to-end ---


def test_private_realtime_page_missing_accessors_is_blocking() -> None:
    report = recommend(
        {"privacy": "Private", "dataFreshness": "RealTime"},
        config=DeclaredConfig(async_accessors=frozenset()),
    )
    assert report.decision.strategy is RenderStrategy.DYNAMIC
    assert any(f.rule_id == "R1" and f.severity is Severity.ERROR for f in report.findings)
    assert report.has_blocking_findings
