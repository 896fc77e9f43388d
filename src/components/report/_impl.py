"""
Recommendation pipeline: normalize -> classify -> synthesize, plus validation.

Functional Core - every call builds its own values; nothing is shared
between requests.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from src.components.caching import (
    CachingHints,
    CachingPolicy,
    generate_cache_headers,
    synthesize,
)
from src.components.profile import ProfileDefaults, normalize
from src.components.strategy import classify
from src.components.validator import (
    DeclaredConfig,
    ValidationFinding,
    ValidatorPolicy,
    sort_findings,
    validate,
)

from .models import RecommendationReport


def recommend(
    raw_profile: Mapping[str, Any],
    hints: CachingHints | None = None,
    config: DeclaredConfig | None = None,
    *,
    defaults: ProfileDefaults | None = None,
    caching_policy: CachingPolicy | None = None,
    validator_policy: ValidatorPolicy | None = None,
) -> RecommendationReport:
    """
    Run the full pipeline for one page.

    Args:
        raw_profile: Raw page characteristics.
        hints: Caching hints for the synthesizer.
        config: Declared configuration to validate; no findings if None.

    Returns:
        RecommendationReport.

    Raises:
        ProfileValidationError: The profile is missing fields or contradictory.
        InvalidHintError: The hints cannot produce a plan for the chosen strategy.
    """
    profile = normalize(raw_profile, defaults)
    decision = classify(profile)
    plan = synthesize(decision, hints, caching_policy)

    findings: list[ValidationFinding] = []
    if config is not None:
        findings = validate(decision, config, validator_policy)

    return RecommendationReport(
        decision=decision,
        caching_plan=plan,
        findings=tuple(findings),
        profile=profile,
        cache_headers=generate_cache_headers(plan, decision.strategy, caching_policy),
    )


def merge_findings(
    report: RecommendationReport,
    findings: Iterable[ValidationFinding],
) -> RecommendationReport:
    """Return a copy of the report with extra findings merged in order."""
    merged = sort_findings([*report.findings, *findings])
    return replace(report, findings=tuple(merged))
