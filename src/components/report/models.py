"""
Report component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.components.caching import CachingHints, CachingPlan
from src.components.profile import PageProfile
from src.components.strategy import StrategyDecision, explain
from src.components.validator import DeclaredConfig, Severity, ValidationFinding


@dataclass(frozen=True)
class RecommendationReport:
    """
    The single artifact handed to downstream tools.

    Created fresh per request. Error findings are build-blocking,
    warnings are advisory.
    """

    decision: StrategyDecision
    caching_plan: CachingPlan
    findings: tuple[ValidationFinding, ...] = ()
    profile: PageProfile | None = None
    cache_headers: dict[str, str] = field(default_factory=dict)

    @property
    def has_blocking_findings(self) -> bool:
        return any(f.severity is Severity.ERROR for f in self.findings)

    @property
    def errors(self) -> list[ValidationFinding]:
        return [f for f in self.findings if f.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationFinding]:
        return [f for f in self.findings if f.severity is Severity.WARNING]

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "strategy": self.decision.strategy.value,
            "rationale": list(self.decision.rationale),
            "explanation": explain(self.decision),
            "rejectedAlternatives": {
                strategy.value: reason
                for strategy, reason in self.decision.rejected_alternatives
            },
            "cachingPlan": self.caching_plan.to_dict(),
            "cacheHeaders": dict(self.cache_headers),
            "findings": [f.to_dict() for f in self.findings],
            "blocking": self.has_blocking_findings,
        }
        if self.profile is not None:
            result["profile"] = self.profile.to_dict()
        return result


@dataclass(frozen=True)
class ReportError:
    """Pipeline error as returned by the component."""

    code: str
    message: str
    field: str | None = None


# --- Input / Output Models ---


@dataclass(frozen=True)
class RecommendInput:
    """Input for a full recommendation request."""

    raw_profile: dict[str, Any]
    hints: CachingHints = field(default_factory=CachingHints)
    config: DeclaredConfig | None = None


@dataclass(frozen=True)
class RecommendOutput:
    """Output of a recommendation request. No partial report on failure."""

    report: RecommendationReport | None
    errors: list[ReportError] = field(default_factory=list)
    success: bool = True
